"""Worked solutions of the error handling exercises."""

from __future__ import annotations

import re

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width strictly; raise ValueError with the reason."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError when the name is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying a typed-in number of items, fee included."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost <= (1 << 31) - 1:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositiveNonzeroInteger):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"PositiveNonzeroInteger({self.value})"


class ParsePosNonzeroError(ValueError):
    """Text did not hold a positive non-zero integer; ``cause`` says why."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err