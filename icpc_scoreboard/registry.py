"""Team registry and submission ledger.

The registry owns every Team and the global submission log. Each Team owns its
own per-problem maps and its submission history; nothing else holds Team data.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

logger = logging.getLogger(__name__)


class DuplicateTeamError(KeyError):
    """Raised when registering a team name that already exists."""


class UnknownTeamError(KeyError):
    """Raised when looking up a team name that was never registered."""


@dataclass(frozen=True)
class Submission:
    team: str
    problem: str
    status: str
    time: int


@dataclass
class Team:
    """Mutable scoring state of one team.

    solve_times is kept in descending order; solved always equals
    len(first_accepted) and len(solve_times).
    """

    name: str
    solved: int = 0
    penalty: int = 0
    wrong_counts: Dict[str, int] = field(default_factory=dict)
    first_accepted: Dict[str, int] = field(default_factory=dict)
    solve_times: List[int] = field(default_factory=list)
    submissions: List[Submission] = field(default_factory=list)

    def last_submission(self, problem: str, status: str, *, wildcard: str = "ALL") -> Submission | None:
        """Most recent submission matching both filters, or None.

        A filter equal to ``wildcard`` matches any problem/status.
        """
        for sub in reversed(self.submissions):
            if problem != wildcard and sub.problem != problem:
                continue
            if status != wildcard and sub.status != status:
                continue
            return sub
        return None


class TeamRegistry:
    """Teams by name, in registration order, plus the global submission log."""

    def __init__(self) -> None:
        self._teams: Dict[str, Team] = {}
        self.log: List[Submission] = []

    def __contains__(self, name: object) -> bool:
        return name in self._teams

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams.values())

    def register(self, name: str) -> Team:
        if name in self._teams:
            raise DuplicateTeamError(name)
        team = Team(name=name)
        self._teams[name] = team
        logger.debug(f"Registered team {name} ({len(self._teams)} total)")
        return team

    def lookup(self, name: str) -> Team:
        try:
            return self._teams[name]
        except KeyError:
            raise UnknownTeamError(name) from None

    def record(self, submission: Submission) -> None:
        self.log.append(submission)
