"""Command-line interface: read command lines, print scoreboard messages."""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict, Iterable, List, Optional

import click

from . import __version__
from .contest import CommandOutcome, Competition, apply_command
from .validation import ScoringConfig

logger = logging.getLogger(__name__)

_SUCCESS_LINES = {
    "START": "[Info]Competition starts.",
    "ADD_TEAM": "[Info]Add successfully.",
    "SUBMIT": "[Info]Submit successfully.",
    "FLUSH": "[Info]Flush scoreboard.",
    "FREEZE": "[Info]Freeze scoreboard.",
    "SCROLL": "[Info]Scroll scoreboard.",
    "QUERY_SUBMISSION": "[Info]Complete query submission.",
    "END": "[Info]Competition ends.",
}

_FAILED_PREFIXES = {
    "START": "Start failed",
    "ADD_TEAM": "Add failed",
    "SUBMIT": "Submit failed",
    "FREEZE": "Freeze failed",
    "SCROLL": "Scroll failed",
    "QUERY_RANKING": "Query ranking failed",
    "QUERY_SUBMISSION": "Query submission failed",
}

# Errors about the competition lifecycle rather than the command itself
_LIFECYCLE_ERRORS = {"not_started", "competition_ended"}

FROZEN_WARNING = "[Warning]Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."
NOT_FOUND_LINE = "Cannot find any submission."


def parse_line(line: str) -> Optional[Dict[str, Any]]:
    """Turn one whitespace-tokenized command line into a command dict.

    Returns None for blank lines. Values are left as strings; numeric
    coercion and required-field checks happen in the validation layer.

    Accepted forms:
        START [DURATION] <minutes>
        SUBMIT <team> <problem> <status> [AT] <minute>
        SUBMIT <problem> BY <team> WITH <status> AT <minute>
        QUERY_SUBMISSION <team> [WHERE] [PROBLEM=<p>] [AND] [STATUS=<s>]
    """
    tokens = line.split()
    if not tokens:
        return None
    ctype = tokens[0].upper()
    args = tokens[1:]
    cmd: Dict[str, Any] = {"type": ctype}

    if ctype == "START":
        if args and args[0].upper() == "DURATION":
            args = args[1:]
        if args:
            cmd["duration"] = args[0]

    elif ctype in {"ADD_TEAM", "QUERY_RANKING"}:
        if args:
            cmd["team"] = args[0]

    elif ctype == "SUBMIT":
        if len(args) == 7 and [a.upper() for a in args[1:6:2]] == ["BY", "WITH", "AT"]:
            cmd.update(problem=args[0], team=args[2], status=args[4], time=args[6])
        else:
            for key, value in zip(("team", "problem", "status"), args):
                cmd[key] = value
            rest = args[3:]
            if rest:
                # the minute is the last token; an "AT" word may precede it
                cmd["time"] = rest[-1]

    elif ctype == "QUERY_SUBMISSION":
        if args:
            cmd["team"] = args[0]
        for token in args[1:]:
            key, sep, value = token.partition("=")
            if not sep:
                continue
            if key.upper() == "PROBLEM":
                cmd["problemFilter"] = value
            elif key.upper() == "STATUS":
                cmd["statusFilter"] = value

    return cmd


def render_outcome(outcome: CommandOutcome) -> List[str]:
    """Text lines for one command outcome."""
    ctype = outcome.cmd_payload.get("type")
    error = outcome.error
    if error is not None:
        if error.kind in _LIFECYCLE_ERRORS:
            return [f"[Error]{error.message.capitalize()}."]
        return [f"[Error]{_FAILED_PREFIXES[ctype]}: {error.message}."]

    if ctype == "QUERY_RANKING":
        lines = [FROZEN_WARNING] if outcome.frozen_warning else []
        lines.append(f"[{outcome.cmd_payload['team']}] NOW AT RANKING {outcome.rank}")
        return lines

    lines = [_SUCCESS_LINES[ctype]]
    if ctype == "SCROLL":
        lines.extend(f"{row.team} {row.rank} {row.solved} {row.penalty}" for row in outcome.rows)
    elif ctype == "QUERY_SUBMISSION":
        sub = outcome.submission
        if sub is None:
            lines.append(NOT_FOUND_LINE)
        else:
            lines.append(f"{sub.team} {sub.problem} {sub.status} {sub.time}")
    return lines


def run(
    lines: Iterable[str],
    emit: Callable[[str], Any],
    *,
    penalty_per_wrong: int = ScoringConfig.WRONG_ATTEMPT_PENALTY,
) -> Competition | None:
    """Feed command lines to the core until END or end of input.

    Malformed lines are logged and skipped. Returns the final competition.
    """
    competition: Competition | None = None
    for lineno, line in enumerate(lines, start=1):
        cmd = parse_line(line)
        if cmd is None:
            continue
        try:
            outcome = apply_command(competition, cmd, penalty_per_wrong=penalty_per_wrong)
        except ValueError as e:
            logger.warning(f"Skipping line {lineno}: {e}")
            continue
        competition = outcome.competition
        for out in render_outcome(outcome):
            emit(out)
        if outcome.ended:
            break
    return competition


@click.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostics written to stderr.",
)
@click.option(
    "--penalty",
    type=click.IntRange(min=0),
    default=ScoringConfig.WRONG_ATTEMPT_PENALTY,
    show_default=True,
    help="Penalty minutes per rejected attempt before a problem is solved.",
)
@click.version_option(version=__version__)
def main(input_file, log_level, penalty):
    """Run an ICPC scoreboard over the commands in INPUT_FILE (default: stdin)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(input_file, click.echo, penalty_per_wrong=penalty)
