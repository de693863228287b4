"""Core scoreboard command transitions (no parsing, no printing).

This module implements the business logic of an ICPC-style contest scoreboard.
Nothing here reads input or writes output; the CLI layer turns text lines into
command dicts and renders the returned outcomes.

Architecture:
- A Competition is one explicit context object created by START; there is no
  module-level state.
- Commands are plain dicts with a 'type' field (START, ADD_TEAM, SUBMIT, ...)
- apply_command() takes (competition, cmd) and returns a CommandOutcome
- The competition is mutated in place; commands are applied strictly one at a time

Key concepts:
- team_order: the published scoreboard. Only FLUSH and SCROLL recompute it;
  teams registered later are appended in arrival order.
- visibility: 'live' | 'frozen'. Frozen does not hide submissions, scores keep
  updating; it only flags rank queries and makes SCROLL legal.

Errors:
- Domain failures (duplicate team, unknown team, freeze/scroll misuse) are
  returned as ContestError values on the outcome, never raised.
- Malformed commands raise ValueError from the validation layer.

State transitions:
- START: creates the competition (rejected if one is already running)
- ADD_TEAM: registers a team, appends it to the published order
- SUBMIT: logs the submission and updates the team's score
- FLUSH: recomputes and publishes the ranking silently
- FREEZE / SCROLL: visibility transitions; SCROLL also publishes and lists the ranking
- QUERY_RANKING / QUERY_SUBMISSION: read-only lookups
- END: marks the competition finished; later commands are rejected
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .ranking import RankingResult, RankingRow, compute_ranking
from .registry import DuplicateTeamError, Submission, TeamRegistry, UnknownTeamError
from .scoring import apply_submission
from .types import ErrorKind
from .validation import InputSanitizer, ScoringConfig
from .visibility import Visibility

logger = logging.getLogger(__name__)


ERROR_MESSAGES = {
    "duplicate_team": "duplicated team name",
    "unknown_team": "cannot find the team",
    "already_frozen": "scoreboard has been frozen",
    "not_frozen": "scoreboard has not been frozen",
    "not_started": "competition has not started",
    "already_started": "competition has already started",
    "competition_ended": "competition has ended",
}


@dataclass
class ContestError:
    """A recoverable, reportable command failure."""

    kind: ErrorKind
    message: str | None = None

    def __post_init__(self) -> None:
        if self.message is None:
            self.message = ERROR_MESSAGES.get(self.kind)


@dataclass
class Competition:
    """All mutable state of one contest."""

    duration: int
    registry: TeamRegistry = field(default_factory=TeamRegistry)
    visibility: Visibility = field(default_factory=Visibility)
    team_order: List[str] = field(default_factory=list)
    ended: bool = False

    @property
    def frozen(self) -> bool:
        return self.visibility.frozen

    def publish(self) -> RankingResult:
        """Recompute the ranking from scratch and make it the published order."""
        result = compute_ranking(self.registry)
        self.team_order = result.order
        logger.debug(f"Published ranking for {len(self.team_order)} teams")
        return result

    def rank_of(self, name: str) -> int:
        """1-based position of ``name`` in the published order."""
        return self.team_order.index(name) + 1


@dataclass
class CommandOutcome:
    """Result of applying a scoreboard command."""

    competition: Competition | None
    cmd_payload: Dict[str, Any]
    error: ContestError | None = None
    rows: tuple[RankingRow, ...] = ()
    rank: int | None = None
    submission: Submission | None = None
    frozen_warning: bool = False
    ended: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def new_competition(duration: int) -> Competition:
    """Create a fresh, live competition with no teams."""
    return Competition(duration=duration)


def _reject(competition: Competition | None, payload: Dict[str, Any], kind: ErrorKind) -> CommandOutcome:
    error = ContestError(kind=kind)
    logger.warning(f"{payload.get('type')} rejected: {error.message}")
    return CommandOutcome(competition=competition, cmd_payload=payload, error=error)


def apply_command(
    competition: Competition | None,
    cmd: Dict[str, Any],
    *,
    penalty_per_wrong: int = ScoringConfig.WRONG_ATTEMPT_PENALTY,
) -> CommandOutcome:
    """Apply one scoreboard command.

    Args:
        competition: Current competition, or None before START
        cmd: Command dict with 'type' field and command-specific params
        penalty_per_wrong: Penalty minutes per rejected attempt before a problem's first accept

    Returns:
        CommandOutcome with the (possibly newly created) competition, the
        normalized payload, and either an error or the command's result fields

    Raises:
        ValueError: if the command is malformed (unknown type, missing fields)
    """
    validated = InputSanitizer.validate_and_sanitize_cmd(cmd)
    payload: Dict[str, Any] = validated.model_dump(exclude_none=True)
    ctype = validated.type

    if competition is not None and competition.ended:
        return _reject(competition, payload, "competition_ended")

    if ctype == "START":
        if competition is not None:
            return _reject(competition, payload, "already_started")
        competition = new_competition(validated.duration)
        logger.debug(f"Competition started, duration={competition.duration}")
        return CommandOutcome(competition=competition, cmd_payload=payload)

    if competition is None:
        return _reject(None, payload, "not_started")

    if ctype == "ADD_TEAM":
        try:
            competition.registry.register(validated.team)
        except DuplicateTeamError:
            return _reject(competition, payload, "duplicate_team")
        competition.team_order.append(validated.team)
        return CommandOutcome(competition=competition, cmd_payload=payload)

    if ctype == "SUBMIT":
        try:
            team = competition.registry.lookup(validated.team)
        except UnknownTeamError:
            return _reject(competition, payload, "unknown_team")
        submission = Submission(
            team=validated.team,
            problem=validated.problem,
            status=validated.status,
            time=validated.time,
        )
        competition.registry.record(submission)
        apply_submission(team, submission, penalty_per_wrong=penalty_per_wrong)
        return CommandOutcome(competition=competition, cmd_payload=payload, submission=submission)

    if ctype == "FLUSH":
        competition.publish()
        return CommandOutcome(competition=competition, cmd_payload=payload)

    if ctype == "FREEZE":
        if not competition.visibility.freeze():
            return _reject(competition, payload, "already_frozen")
        return CommandOutcome(competition=competition, cmd_payload=payload)

    if ctype == "SCROLL":
        if not competition.visibility.scroll():
            return _reject(competition, payload, "not_frozen")
        result = competition.publish()
        return CommandOutcome(competition=competition, cmd_payload=payload, rows=result.rows)

    if ctype == "QUERY_RANKING":
        if validated.team not in competition.registry:
            return _reject(competition, payload, "unknown_team")
        return CommandOutcome(
            competition=competition,
            cmd_payload=payload,
            rank=competition.rank_of(validated.team),
            frozen_warning=competition.frozen,
        )

    if ctype == "QUERY_SUBMISSION":
        try:
            team = competition.registry.lookup(validated.team)
        except UnknownTeamError:
            return _reject(competition, payload, "unknown_team")
        found = team.last_submission(
            validated.problemFilter,
            validated.statusFilter,
            wildcard=ScoringConfig.WILDCARD,
        )
        return CommandOutcome(competition=competition, cmd_payload=payload, submission=found)

    # END
    competition.ended = True
    logger.debug("Competition ended")
    return CommandOutcome(competition=competition, cmd_payload=payload, ended=True)
