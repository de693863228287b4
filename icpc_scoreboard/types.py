"""Type definitions for scoreboard commands."""
from __future__ import annotations

from typing import Literal, Optional, TypedDict


VisibilityState = Literal["live", "frozen"]

ErrorKind = Literal[
    "duplicate_team",
    "unknown_team",
    "already_frozen",
    "not_frozen",
    "not_started",
    "already_started",
    "competition_ended",
]


class CommandPayload(TypedDict, total=False):
    """
    TypedDict for command payloads sent to apply_command().

    Fields vary by command type.
    """
    # Common
    type: str

    # START
    duration: Optional[int]

    # ADD_TEAM, SUBMIT, QUERY_RANKING, QUERY_SUBMISSION
    team: Optional[str]

    # SUBMIT
    problem: Optional[str]
    status: Optional[str]
    time: Optional[int]

    # QUERY_SUBMISSION ("ALL" matches anything)
    problemFilter: Optional[str]
    statusFilter: Optional[str]
