"""Time-limited food spawning and expiry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from timed_snake.grid import Cell

if TYPE_CHECKING:
    from timed_snake.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodItem:
    """A single food item and the moment it appeared."""

    position: Cell
    spawned_at: float
    lifetime: float = 4.0

    def __post_init__(self) -> None:
        if self.lifetime <= 0:
            raise ValueError("lifetime must be positive.")

    def elapsed(self, now: float) -> float:
        return now - self.spawned_at

    def remaining_lifetime(self, now: float) -> float:
        """Seconds left before expiry, clamped at zero."""
        return max(0.0, self.lifetime - self.elapsed(now))

    def remaining_fraction(self, now: float) -> float:
        """Remaining lifetime as a fraction in ``[0, 1]``."""
        return min(1.0, self.remaining_lifetime(now) / self.lifetime)

    def is_expired(self, now: float) -> bool:
        return self.elapsed(now) >= self.lifetime

    def is_expiring(self, now: float, warning: float = 1.0) -> bool:
        """True once fewer than *warning* seconds of life remain."""
        return self.lifetime - self.elapsed(now) < warning

    def to_dict(self, now: float) -> dict:
        return {
            "position": list(self.position),
            "remaining": self.remaining_lifetime(now),
            "remaining_fraction": self.remaining_fraction(now),
        }


class FoodManager:
    """Owns the active food set and its spawn schedule.

    Food fills up back-to-back while fewer than ``max_food`` items are
    present; once the cap is reached, the next spawn is held off for
    ``spawn_delay`` seconds. Placement uses a seeded NumPy RNG so runs
    are reproducible.
    """

    def __init__(
        self,
        grid: Grid,
        max_food: int = 4,
        lifetime: float = 4.0,
        spawn_delay: float = 1.0,
        max_attempts: int = 64,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_food < 1:
            raise ValueError("max_food must be at least 1.")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_food = max_food
        self.lifetime = lifetime
        self.spawn_delay = spawn_delay
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()
        self.items: list[FoodItem] = []
        self.next_spawn_deadline: float | None = None

    def __len__(self) -> int:
        return len(self.items)

    @property
    def positions(self) -> list[Cell]:
        return [item.position for item in self.items]

    @property
    def at_capacity(self) -> bool:
        return len(self.items) >= self.max_food

    def clear(self) -> None:
        """Drop all food and forget the spawn deadline."""
        self.items.clear()
        self.next_spawn_deadline = None

    def expire_stale(self, now: float) -> list[FoodItem]:
        """Remove every item whose lifetime has run out.

        Returns the removed items.
        """
        expired = [item for item in self.items if item.is_expired(now)]
        if expired:
            self.items = [item for item in self.items if not item.is_expired(now)]
            logger.debug("Expired %d food item(s).", len(expired))
        return expired

    def consume(self, cell: Cell) -> FoodItem | None:
        """Remove and return the first item at *cell*, if any."""
        for i, item in enumerate(self.items):
            if item.position == cell:
                return self.items.pop(i)
        return None

    def spawn_due(self, now: float) -> bool:
        """Whether a spawn attempt is allowed at *now*."""
        if self.at_capacity:
            return False
        return self.next_spawn_deadline is None or now >= self.next_spawn_deadline

    def try_spawn(self, now: float, occupied: Iterable[Cell]) -> FoodItem | None:
        """Spawn one item if the cap and deadline allow it.

        *occupied* are the snake cells; existing food positions are
        excluded automatically. Returns the new item, or ``None`` when the
        attempt was deferred or no free cell was left.
        """
        if not self.spawn_due(now):
            if not self.at_capacity:
                logger.debug(
                    "Spawn deferred until %.3f (now %.3f).",
                    self.next_spawn_deadline, now,
                )
            return None

        blocked = set(occupied)
        blocked.update(self.positions)
        position = self._place(blocked)
        if position is None:
            logger.warning("No empty cells available for food spawning.")
            self.next_spawn_deadline = now + self.spawn_delay
            return None

        item = FoodItem(position=position, spawned_at=now, lifetime=self.lifetime)
        self.items.append(item)
        if self.at_capacity:
            self.next_spawn_deadline = now + self.spawn_delay
        else:
            self.next_spawn_deadline = now
        logger.debug("Spawned food at %s (%d active).", position, len(self.items))
        return item

    def _place(self, blocked: set[Cell]) -> Cell | None:
        """Pick a random unblocked cell.

        Rejection sampling first; if every draw lands on a blocked cell
        the choice falls back to a uniform pick among the free cells.
        """
        for _ in range(self.max_attempts):
            cell = self.grid.random_cell(self.rng)
            if cell not in blocked:
                return cell

        free = self.grid.free_cells(blocked)
        if not free:
            return None
        return free[int(self.rng.integers(len(free)))]

    def to_dict(self, now: float) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "items": [item.to_dict(now) for item in self.items],
            "max_food": self.max_food,
            "next_spawn_deadline": self.next_spawn_deadline,
        }
