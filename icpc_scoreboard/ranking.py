"""ICPC ranking engine.

Single source of truth for team order across flush/scroll/queries:
- Comparator: more solved > lower penalty > earlier solve times > team name.
- Team name is the last key, so two distinct teams never compare equal.
- No incremental updates: every ranking is a full resort of current state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .registry import Team


@dataclass(frozen=True)
class RankingRow:
    team: str
    rank: int
    solved: int
    penalty: int


@dataclass(frozen=True)
class RankingResult:
    rows: tuple[RankingRow, ...]

    @property
    def order(self) -> list[str]:
        return [row.team for row in self.rows]


def team_sort_key(team: Team) -> tuple[int, int, tuple[int, ...], str]:
    # solve_times is stored descending, so comparing the tuples compares the
    # latest solves first; equal solved counts mean equal tuple lengths.
    return (-team.solved, team.penalty, tuple(team.solve_times), team.name)


def compare_teams(a: Team, b: Team) -> int:
    """Return -1 if ``a`` ranks better than ``b``, 1 if worse, 0 only for the same name."""
    key_a = team_sort_key(a)
    key_b = team_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def compute_ranking(teams: Iterable[Team]) -> RankingResult:
    """
    Compute the full scoreboard order from current aggregate state.

    Args:
      teams: every registered team, in any order.

    Returns:
      RankingResult with 1-based ranks, best team first.
    """
    ordered: Sequence[Team] = sorted(teams, key=team_sort_key)
    rows = tuple(
        RankingRow(team=team.name, rank=pos, solved=team.solved, penalty=team.penalty)
        for pos, team in enumerate(ordered, start=1)
    )
    return RankingResult(rows=rows)
