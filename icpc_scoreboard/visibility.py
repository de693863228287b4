"""Live/Frozen visibility state machine.

Frozen does not hide submissions: aggregate scores keep updating while frozen.
The state only decides whether rank queries carry the frozen advisory and
whether SCROLL is legal.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .types import VisibilityState

logger = logging.getLogger(__name__)


@dataclass
class Visibility:
    state: VisibilityState = "live"

    @property
    def frozen(self) -> bool:
        return self.state == "frozen"

    def freeze(self) -> bool:
        """live -> frozen. Returns False (and changes nothing) if already frozen."""
        if self.frozen:
            logger.debug("Freeze ignored: scoreboard already frozen")
            return False
        self.state = "frozen"
        logger.debug("Scoreboard frozen")
        return True

    def scroll(self) -> bool:
        """frozen -> live. Returns False (and changes nothing) if live."""
        if not self.frozen:
            logger.debug("Scroll ignored: scoreboard is not frozen")
            return False
        self.state = "live"
        logger.debug("Scoreboard scrolled back to live")
        return True
