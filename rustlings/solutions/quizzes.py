"""Worked solutions of the quiz exercises."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""

    def apply(text: str, command: Command) -> str:
        match command:
            case Uppercase():
                return text.upper()
            case Trim():
                return text.strip()
            case Append(times=times):
                return text + "bar" * times
            case _:
                raise TypeError(f"unknown command: {command!r}")

    return [apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with any printable grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"