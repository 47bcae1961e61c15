"""Blocking stream copying: stdin to stdout and file to socket."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, BinaryIO, Sequence

DEFAULT_BUFFER_SIZE = 4096


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size < 1:
        raise ValueError(f"buffer size must be positive: {buffer_size}")


def copy_stream(source: BinaryIO, target: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """Copy ``source`` to ``target`` in chunks until end of input; return the bytes copied."""
    _check_buffer_size(buffer_size)
    total = 0
    while chunk := source.read(buffer_size):
        view = memoryview(chunk)
        offset = 0
        while offset < len(view):
            written = target.write(view[offset:])
            offset += len(view) - offset if written is None else written
        total += len(chunk)
    return total


def send_file(filename: str | Path, sock: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """Send a file over ``sock`` in chunks, close the socket, and return the bytes sent."""
    _check_buffer_size(buffer_size)
    total = 0
    with open(filename, "rb") as handle:
        while chunk := handle.read(buffer_size):
            sock.sendall(chunk)
            total += len(chunk)
    sock.close()
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Copy standard input to standard output."""
    parser = argparse.ArgumentParser(
        prog="algobasis-cat", description="Copy standard input to standard output."
    )
    parser.add_argument("--buffer-size", type=int, default=DEFAULT_BUFFER_SIZE)
    args = parser.parse_args(argv)
    if args.buffer_size < 1:
        parser.error("buffer size must be positive")
    sys.stdout.flush()
    out = sys.stdout.buffer
    copy_stream(sys.stdin.buffer, out, args.buffer_size)
    out.flush()
    return 0