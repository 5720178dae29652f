"""Worked solutions of the hash map, option and vector exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_GOALS = re.compile(r"\+?[0-9]+")


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five fruits in all."""
    return {"banana": 2, "apple": 2, "aa": 1, "bb": 1, "cc": 1}


class Fruit(enum.Enum):
    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of each missing kind of fruit, leaving present kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text) or int(text) > 255:
        raise ValueError(f"invalid goal count: {text!r}")
    return int(text)


def build_scores_table(results: str) -> dict[str, Team]:
    """Goals scored and conceded per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2
        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour: 5 before 22, 0 at 22 and 23, None past 23."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a vector holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]