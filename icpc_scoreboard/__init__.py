__version__ = "0.1.0"

from .contest import (
    CommandOutcome,
    Competition,
    ContestError,
    apply_command,
    new_competition,
)
from .types import CommandPayload
from .validation import InputSanitizer, ScoringConfig, ValidatedCmd
from .registry import (
    DuplicateTeamError,
    Submission,
    Team,
    TeamRegistry,
    UnknownTeamError,
)
from .scoring import apply_submission, problem_penalty
from .ranking import (
    RankingResult,
    RankingRow,
    compare_teams,
    compute_ranking,
    team_sort_key,
)
from .visibility import Visibility

__all__ = [
    "CommandOutcome",
    "CommandPayload",
    "Competition",
    "ContestError",
    "apply_command",
    "new_competition",
    "ValidatedCmd",
    "ScoringConfig",
    "InputSanitizer",
    "DuplicateTeamError",
    "Submission",
    "Team",
    "TeamRegistry",
    "UnknownTeamError",
    "apply_submission",
    "problem_penalty",
    "RankingResult",
    "RankingRow",
    "compare_teams",
    "compute_ranking",
    "team_sort_key",
    "Visibility",
]
