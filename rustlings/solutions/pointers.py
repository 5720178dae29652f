"""Worked solutions of the box and copy-on-write exercises."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values, copying only when a value has to change.

    Without negative values the very same sequence is returned.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]