"""Apply one submission to a team's aggregate score (first accepted wins)."""
from __future__ import annotations

import logging
from bisect import insort

from .registry import Submission, Team
from .validation import ScoringConfig

logger = logging.getLogger(__name__)


def _descending(minute: int) -> int:
    return -minute


def problem_penalty(wrong_attempts: int, minute: int, *, penalty_per_wrong: int = ScoringConfig.WRONG_ATTEMPT_PENALTY) -> int:
    """Penalty contributed by a solved problem."""
    return penalty_per_wrong * wrong_attempts + minute


def apply_submission(
    team: Team,
    submission: Submission,
    *,
    penalty_per_wrong: int = ScoringConfig.WRONG_ATTEMPT_PENALTY,
) -> bool:
    """Record ``submission`` on ``team`` and update its score.

    Returns True when the submission is the team's first accepted one for
    that problem (i.e. it changed solved/penalty/solve_times).

    Behavior:
        - The submission is always appended to the team's history.
        - Non-accepted submissions bump wrong_counts, even on solved problems
          (the counter is inert after the solve).
        - Accepted submissions on already solved problems change nothing else.
    """
    team.submissions.append(submission)
    problem = submission.problem

    if submission.status != ScoringConfig.ACCEPTED:
        team.wrong_counts[problem] = team.wrong_counts.get(problem, 0) + 1
        return False

    if problem in team.first_accepted:
        return False

    # wrong_counts is read before this submission; an accept is never a wrong attempt
    contribution = problem_penalty(
        team.wrong_counts.get(problem, 0),
        submission.time,
        penalty_per_wrong=penalty_per_wrong,
    )
    team.first_accepted[problem] = submission.time
    team.penalty += contribution
    team.solved += 1
    insort(team.solve_times, submission.time, key=_descending)
    logger.debug(
        f"{team.name} solved {problem} at {submission.time} "
        f"(+{contribution}, solved={team.solved}, penalty={team.penalty})"
    )
    return True
