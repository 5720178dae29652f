"""Worked solutions of the trait and generic exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_BAR = "Bar"
LICENSING_INFO = "Some information"


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add "Bar" as a new item of a list of strings."""
    if isinstance(value, str):
        return value + _BAR
    if isinstance(value, list):
        return [*value, _BAR]
    raise TypeError(f"cannot append {_BAR!r} to {type(value).__name__}")


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return LICENSING_INFO


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


def some_func(item: SomeTrait) -> bool:
    """Require an item offering both behaviours and combine their answers."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError("item must provide both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T