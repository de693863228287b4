"""
Input validation schemas using Pydantic v2
Validates all command types before they reach the scoreboard core
"""

import logging
from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class ScoringConfig:
    """Scoring constants shared by the core and the CLI"""

    # Penalty minutes added per rejected attempt before the first accept
    WRONG_ATTEMPT_PENALTY = 20
    # The only status that solves a problem
    ACCEPTED = "Accepted"
    # Filter value that matches any problem/status in submission queries
    WILDCARD = "ALL"


COMMAND_TYPES = {
    "START",
    "ADD_TEAM",
    "SUBMIT",
    "FLUSH",
    "FREEZE",
    "SCROLL",
    "QUERY_RANKING",
    "QUERY_SUBMISSION",
    "END",
}

# ==================== VALIDATOR FUNCTIONS ====================


class ValidatedCmd(BaseModel):
    """Scoreboard command with per-type field validation"""

    type: str = Field(..., min_length=1, max_length=50, description="Command type")

    # START
    duration: Optional[int] = Field(None, ge=0, description="Contest duration in minutes")

    # Team-scoped commands
    team: Optional[str] = Field(None, min_length=1, description="Team name")

    # SUBMIT
    problem: Optional[str] = Field(None, min_length=1, description="Problem name")
    status: Optional[str] = Field(None, min_length=1, description="Judge status, e.g. 'Accepted'")
    time: Optional[int] = Field(None, ge=0, description="Submission minute")

    # QUERY_SUBMISSION filters; an empty filter matches nothing
    problemFilter: Optional[str] = None
    statusFilter: Optional[str] = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate command type is one of allowed types"""
        v = v.strip().upper()
        if v not in COMMAND_TYPES:
            raise ValueError(f"type must be one of {sorted(COMMAND_TYPES)}, got {v}")
        return v

    @field_validator("team", "problem", "status")
    @classmethod
    def validate_token(cls, v: Optional[str]) -> Optional[str]:
        """Names are single tokens: output lines are space separated"""
        if v is None:
            return v
        v = InputSanitizer.sanitize_string(v)
        if len(v) == 0:
            raise ValueError("value cannot be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"value must not contain whitespace: {v!r}")
        return v

    @field_validator("problemFilter", "statusFilter")
    @classmethod
    def validate_filter(cls, v: Optional[str]) -> Optional[str]:
        """Filters are single tokens too, but may be empty"""
        if v is None:
            return v
        v = InputSanitizer.sanitize_string(v)
        if any(ch.isspace() for ch in v):
            raise ValueError(f"filter must not contain whitespace: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_command_fields(self) -> Self:
        """Validate required fields based on command type"""
        cmd_type = self.type

        if cmd_type == "START":
            if self.duration is None:
                raise ValueError("START requires duration")

        elif cmd_type in {"ADD_TEAM", "QUERY_RANKING", "QUERY_SUBMISSION"}:
            if self.team is None:
                raise ValueError(f"{cmd_type} requires team")

        elif cmd_type == "SUBMIT":
            for name in ("team", "problem", "status", "time"):
                if getattr(self, name) is None:
                    raise ValueError(f"SUBMIT requires {name}")

        if cmd_type == "QUERY_SUBMISSION":
            if self.problemFilter is None:
                self.problemFilter = ScoringConfig.WILDCARD
            if self.statusFilter is None:
                self.statusFilter = ScoringConfig.WILDCARD

        return self

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class InputSanitizer:
    """Utility class for input sanitization"""

    @staticmethod
    def sanitize_string(value: str, max_length: Optional[int] = None) -> str:
        """Sanitize string input; truncate only when max_length is given"""
        if not isinstance(value, str):
            value = str(value)

        value = value.strip()
        if max_length is not None:
            value = value[:max_length]
        value = value.replace("\0", "")

        return value

    @staticmethod
    def validate_and_sanitize_cmd(cmd_dict: dict) -> ValidatedCmd:
        """
        Validate and sanitize command dictionary

        Returns:
            ValidatedCmd: Validated command object

        Raises:
            ValueError: If validation fails
        """
        try:
            return ValidatedCmd(**cmd_dict)
        except ValidationError as e:
            logger.warning(f"Command validation failed: {e}")
            raise ValueError(f"Invalid command: {str(e)}") from e


# ==================== EXPORT ====================

__all__ = [
    "COMMAND_TYPES",
    "ValidatedCmd",
    "ScoringConfig",
    "InputSanitizer",
]
