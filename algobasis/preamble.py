"""Introductory exercises: a recursive factorial and a list of student records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


@dataclass
class Student:
    """A student record."""

    no: int
    name: str
    addr: str


class StudentList:
    """Student records kept in the order given, with ordered insertion by number."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students = list(students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def insert_sorted(self, student: Student) -> None:
        """Insert ``student`` before the first record whose number is not smaller."""
        index = next(
            (i for i, other in enumerate(self._students) if student.no <= other.no),
            len(self._students),
        )
        self._students.insert(index, student)

    def delete(self, no: int) -> Student:
        """Remove and return the first record with number ``no``."""
        if not self._students:
            raise KeyError("list is empty, nothing to delete")
        for i, student in enumerate(self._students):
            if student.no == no:
                return self._students.pop(i)
        raise KeyError(f"no student with number {no}")

    def display(self) -> str:
        """Render one ``no name addr`` line per record."""
        return "\n".join(f"{s.no} {s.name} {s.addr}" for s in self._students)