"""Dense and sparse graphs, a graph-file reader and connected components."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Protocol, TypeVar


class _Graph(Protocol):
    def vertex_count(self) -> int: ...

    def add_edge(self, v: int, w: int) -> None: ...

    def adjacent(self, v: int) -> Iterator[int]: ...


G = TypeVar("G", bound=_Graph)


def _check_vertex(v: int, vertices: int) -> None:
    if not 0 <= v < vertices:
        raise IndexError(f"vertex {v} out of range 0..{vertices - 1}")


class DenseGraph:
    """A graph stored as an adjacency matrix; parallel edges are ignored."""

    def __init__(self, vertices: int, directed: bool) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative: {vertices}")
        self._vertices = vertices
        self._edges = 0
        self.directed = directed
        self._matrix = [[False] * vertices for _ in range(vertices)]

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return self._vertices

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edges

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` to ``w``; an existing edge is left alone."""
        if self.has_edge(v, w):
            return
        self._matrix[v][w] = True
        if not self.directed:
            self._matrix[w][v] = True
        self._edges += 1

    def has_edge(self, v: int, w: int) -> bool:
        """Return True if there is an edge from ``v`` to ``w``."""
        _check_vertex(v, self._vertices)
        _check_vertex(w, self._vertices)
        return self._matrix[v][w]

    def adjacent(self, v: int) -> Iterator[int]:
        """Yield the neighbours of ``v`` in ascending order."""
        _check_vertex(v, self._vertices)
        return (w for w, linked in enumerate(self._matrix[v]) if linked)

    def show(self) -> str:
        """Render the adjacency matrix, one tab-separated row per line."""
        return "\n".join(
            "".join(f"{int(linked)}\t" for linked in row) for row in self._matrix
        )


class SparseGraph:
    """A graph stored as adjacency lists; parallel edges are kept."""

    def __init__(self, vertices: int, directed: bool) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative: {vertices}")
        self._vertices = vertices
        self._edges = 0
        self.directed = directed
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return self._vertices

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edges

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` to ``w``; a self-loop is listed once."""
        _check_vertex(v, self._vertices)
        _check_vertex(w, self._vertices)
        self._adj[v].append(w)
        if v != w and not self.directed:
            self._adj[w].append(v)
        self._edges += 1

    def has_edge(self, v: int, w: int) -> bool:
        """Return True if there is an edge from ``v`` to ``w``."""
        _check_vertex(v, self._vertices)
        _check_vertex(w, self._vertices)
        return w in self._adj[v]

    def adjacent(self, v: int) -> Iterator[int]:
        """Yield the neighbours of ``v`` in the order their edges were added."""
        _check_vertex(v, self._vertices)
        return iter(self._adj[v])

    def show(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        return "\n".join(
            f"vertex {v}:\t" + "".join(f"{w}\t" for w in neighbours)
            for v, neighbours in enumerate(self._adj)
        )


def _parse_pair(line: str, what: str) -> tuple[int, int]:
    fields = line.split()
    if len(fields) < 2:
        raise ValueError(f"malformed {what}: {line!r}")
    try:
        return int(fields[0]), int(fields[1])
    except ValueError as exc:
        raise ValueError(f"malformed {what}: {line!r}") from exc


def read_graph(graph: G, filename: str | Path) -> G:
    """Add the edges listed in a graph file to ``graph`` and return it.

    The first line holds the vertex and edge counts; each following line one edge.
    """
    with open(filename, encoding="utf-8") as handle:
        lines = iter(handle)
        header = next(lines, None)
        if header is None:
            raise ValueError(f"{filename}: empty graph file")
        vertices, edges = _parse_pair(header, "header")
        if vertices != graph.vertex_count():
            raise ValueError(
                f"{filename}: file has {vertices} vertices, graph has {graph.vertex_count()}"
            )
        for _ in range(edges):
            line = next(lines, None)
            if line is None:
                raise ValueError(f"{filename}: fewer than {edges} edges")
            a, b = _parse_pair(line, "edge")
            if not (0 <= a < vertices and 0 <= b < vertices):
                raise ValueError(f"{filename}: edge {a} {b} out of range")
            graph.add_edge(a, b)
    return graph


class Components:
    """The connected components of a graph, found by depth-first search."""

    def __init__(self, graph: _Graph) -> None:
        self._vertices = graph.vertex_count()
        self._id = [-1] * self._vertices
        self._count = 0
        for start in range(self._vertices):
            if self._id[start] != -1:
                continue
            self._id[start] = self._count
            stack = [start]
            while stack:
                v = stack.pop()
                for w in graph.adjacent(v):
                    if self._id[w] == -1:
                        self._id[w] = self._count
                        stack.append(w)
            self._count += 1

    def count(self) -> int:
        """Return the number of connected components."""
        return self._count

    def is_connected(self, v: int, w: int) -> bool:
        """Return True if ``v`` and ``w`` lie in the same component."""
        _check_vertex(v, self._vertices)
        _check_vertex(w, self._vertices)
        return self._id[v] == self._id[w]