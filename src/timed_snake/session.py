"""Lives, score and game-over bookkeeping."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    """Lifecycle states of a session."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    """Sole owner of lives, score and phase for one play-through.

    Lives and score survive an in-session reset; only
    :meth:`new_session` restores the defaults.
    """

    initial_lives: int = 3
    lives: int = 3
    score: int = 0
    phase: Phase = Phase.PLAYING

    @classmethod
    def start(cls, initial_lives: int = 3) -> SessionState:
        if initial_lives < 1:
            raise ValueError("initial_lives must be at least 1.")
        return cls(initial_lives=initial_lives, lives=initial_lives)

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def award(self, points: int) -> None:
        """Add *points* to the score while playing."""
        if self.playing:
            self.score += points

    def lose_life(self) -> bool:
        """Record a collision.

        Returns True if the session continues (the caller should reset
        the board), False if it just ended.
        """
        if not self.playing:
            return False
        self.lives -= 1
        if self.lives > 0:
            logger.info("Life lost; %d remaining, score %d.", self.lives, self.score)
            return True
        self.phase = Phase.GAME_OVER
        logger.info("Game over with score %d.", self.score)
        return False

    def new_session(self) -> bool:
        """Restart from game over. Returns False while still playing."""
        if self.playing:
            return False
        self.lives = self.initial_lives
        self.score = 0
        self.phase = Phase.PLAYING
        logger.info("New session started with %d lives.", self.lives)
        return True

    def to_dict(self) -> dict:
        return {
            "lives": self.lives,
            "score": self.score,
            "phase": self.phase.value,
        }
