"""Game configuration constants."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a single-player session.

    Durations are in seconds of simulated (or wall) time. The defaults
    reproduce the classic 320x240 board at 24-pixel tiles.
    """

    # Board
    grid_width: int = 13
    grid_height: int = 10
    tile_size: int = 24

    # Timing
    tick_interval: float = 0.1
    food_lifetime: float = 4.0
    spawn_delay: float = 1.0
    expiry_warning: float = 1.0
    flash_period: float = 0.1

    # Food
    max_food: int = 4
    max_spawn_attempts: int = 64

    # Session
    initial_length: int = 3
    initial_lives: int = 3
    food_reward: int = 10

    def __post_init__(self) -> None:
        if self.grid_width < 4 or self.grid_height < 4:
            raise ValueError("grid_width and grid_height must each be at least 4.")
        if self.tile_size < 1:
            raise ValueError("tile_size must be at least 1.")
        for name in ("tick_interval", "food_lifetime", "flash_period"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive.")
        if self.spawn_delay < 0 or self.expiry_warning < 0:
            raise ValueError("spawn_delay and expiry_warning must not be negative.")
        if self.max_food < 1:
            raise ValueError("max_food must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.initial_lives < 1:
            raise ValueError("initial_lives must be at least 1.")
        if self.food_reward < 0:
            raise ValueError("food_reward must not be negative.")
        if self.grid_width // 2 - (self.initial_length - 1) < 0:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase grid_width or reduce initial_length."
            )

    @property
    def start_cell(self) -> tuple[int, int]:
        """Head position of a freshly initialized snake."""
        return self.grid_width // 2, self.grid_height // 2

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
