"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["mango"] = 3
    basket["pineapple"] = 5
    basket["watermelon"] = 8
    return basket


class Fruit(enum.Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add five of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 5)


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("goal tally overflow")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
    return scores