"""Time-gated game engine composing grid, snake, food and session logic."""

from __future__ import annotations

import logging

import numpy as np

from timed_snake.config import GameConfig
from timed_snake.food import FoodManager
from timed_snake.grid import Grid
from timed_snake.movement import MoveResult, advance_snake
from timed_snake.scheduler import TickScheduler
from timed_snake.session import Phase, SessionState
from timed_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-player engine driven by an external clock.

    The host calls :meth:`step` on every poll with the current time;
    the engine advances the simulation only when a tick is due. All
    state is mutated in place, and readers should treat what they see
    as a snapshot valid until the next call.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        now: float = 0.0,
        seed: int | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.grid = Grid(width=cfg.grid_width, height=cfg.grid_height)
        self.rng = np.random.default_rng(seed)
        self.food = FoodManager(
            self.grid,
            max_food=cfg.max_food,
            lifetime=cfg.food_lifetime,
            spawn_delay=cfg.spawn_delay,
            max_attempts=cfg.max_spawn_attempts,
            rng=self.rng,
        )
        self.scheduler = TickScheduler(cfg.tick_interval, now=now)
        self.session = SessionState.start(cfg.initial_lives)
        self.snake = self._new_snake()
        self.tick = 0
        self.last_result: MoveResult | None = None
        self._pending_direction: Direction | None = None

    def _new_snake(self) -> Snake:
        col, row = self.config.start_cell
        return Snake(col, row, Direction.RIGHT, length=self.config.initial_length)

    @property
    def heading(self) -> Direction:
        """The heading the next tick will use."""
        if self._pending_direction is not None:
            return self._pending_direction
        return self.snake.direction

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def set_heading(self, direction: Direction) -> bool:
        """Buffer a heading change for the next tick.

        Reversals of either the last travelled heading or the buffered one
        are ignored, as is any input after game over. Returns whether the
        request was accepted.
        """
        if self.session.game_over:
            return False
        if direction.is_reverse_of(self.snake.direction):
            return False
        if direction.is_reverse_of(self.heading):
            return False
        self._pending_direction = direction
        return True

    def request_new_session(self, now: float) -> bool:
        """Start over with full lives and zero score after game over."""
        if not self.session.new_session():
            return False
        self._reset_board(now)
        return True

    def step(self, now: float, heading: Direction | None = None) -> dict:
        """Advance the game if a tick is due at *now*.

        Returns the full game state as a serializable dict.
        """
        if heading is not None:
            self.set_heading(heading)

        if self.session.game_over or not self.scheduler.poll(now):
            return self.get_state(now)

        self._run_tick(now)
        return self.get_state(now)

    def _run_tick(self, now: float) -> MoveResult:
        self.tick += 1
        if self._pending_direction is not None:
            self.snake.set_direction(self._pending_direction)
            self._pending_direction = None

        result = advance_snake(self.snake, self.grid, self.food)
        self.last_result = result

        if result.collided:
            logger.info(
                "Snake hit %s at %s on tick %d.",
                result.collision.value, result.head, self.tick,
            )
            if self.session.lose_life():
                self._reset_board(now)
            return result

        if result.grew:
            self.session.award(self.config.food_reward)

        self.food.expire_stale(now)
        self.food.try_spawn(now, self.snake.body)
        return result

    def _reset_board(self, now: float) -> None:
        """Re-initialize snake, food and timers; lives and score are kept."""
        self.snake = self._new_snake()
        self._pending_direction = None
        self.food.clear()
        self.scheduler.reset(now)

    def get_state(self, now: float) -> dict:
        """Return the full, serializable game state."""
        warning = self.config.expiry_warning
        food = self.food.to_dict(now)
        for entry, item in zip(food["items"], self.food.items, strict=True):
            entry["expiring"] = item.is_expiring(now, warning)
        return {
            "tick": self.tick,
            **self.session.to_dict(),
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "heading": self.heading.name.lower(),
            "food": food,
        }
