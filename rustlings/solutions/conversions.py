"""Worked solutions of the conversion exercises."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer strictly; raise ValueError with the reason."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonError(ValueError):
    """A person could not be parsed from text."""


class EmptyInputError(ParsePersonError):
    """The input string was empty."""


class FieldCountError(ParsePersonError):
    """The input did not have exactly two comma-separated fields."""


class NoNameError(ParsePersonError):
    """The name field was empty."""


class InvalidAgeError(ParsePersonError):
    """The age field was not an unsigned integer."""


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: 30 year old John."""
        return cls(name="John", age=30)

    @classmethod
    def from_string(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        if not text:
            return cls.default()
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse exactly "name,age"; raise a ParsePersonError otherwise."""
        if not text:
            raise EmptyInputError("empty input")
        fields = text.split(",")
        if len(fields) != 2:
            raise FieldCountError(f"expected 2 fields, found {len(fields)}")
        name, age_text = fields
        if not name:
            raise NoNameError("empty name")
        try:
            age = _parse_usize(age_text)
        except ValueError as err:
            raise InvalidAgeError(str(err)) from err
        return cls(name=name, age=age)


class IntoColorError(ValueError):
    """Values could not be converted into a colour."""


class ColorLengthError(IntoColorError):
    """Not exactly three components were given."""


class ColorRangeError(IntoColorError):
    """A component lies outside 0..=255."""


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> Color:
        """Build a colour from three components, each in 0..=255."""
        components = tuple(values)
        if len(components) != 3:
            raise ColorLengthError(f"expected 3 components, found {len(components)}")
        for component in components:
            if not 0 <= component <= 255:
                raise ColorRangeError(f"component {component} is out of range")
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)