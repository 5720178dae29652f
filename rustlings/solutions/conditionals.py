"""Worked solutions of the conditional exercises."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")