"""Headless simulation of full sessions under a simulated clock."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from timed_snake.config import GameConfig
from timed_snake.engine import GameEngine
from timed_snake.render import render_text
from timed_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate results from a simulation run."""

    sessions: int
    total_ticks: int
    food_eaten: int
    best_score: int
    mean_score: float
    wall_time_seconds: float

    @property
    def ticks_per_second(self) -> float:
        if self.wall_time_seconds <= 0:
            return 0.0
        return self.total_ticks / self.wall_time_seconds

    def summary(self) -> str:
        return (
            f"Simulation: {self.sessions} session(s), "
            f"{self.total_ticks} ticks, {self.food_eaten} food eaten in "
            f"{self.wall_time_seconds:.2f}s | "
            f"best {self.best_score}, mean {self.mean_score:.1f} | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def run_session(
    engine: GameEngine,
    rng: np.random.Generator,
    *,
    max_ticks: int = 10_000,
    turn_probability: float = 0.2,
    show: bool = False,
) -> tuple[int, int]:
    """Drive *engine* with random headings until game over.

    The clock advances exactly one tick interval per call, so every call
    runs a tick. Returns ``(ticks, food_eaten)``.
    """
    now = engine.scheduler.last_tick
    interval = engine.config.tick_interval
    ticks = 0
    eaten = 0
    while not engine.session.game_over and ticks < max_ticks:
        heading = None
        if rng.random() < turn_probability:
            heading = _DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))]
        now += interval
        state = engine.step(now, heading)
        ticks += 1
        if engine.last_result is not None and engine.last_result.grew:
            eaten += 1
        if show:
            print(render_text(state), end="\n\n")  # noqa: T201
    return ticks, eaten


def simulate_sessions(
    *,
    sessions: int = 100,
    seed: int = 42,
    max_ticks: int = 10_000,
    config: GameConfig | None = None,
    show: bool = False,
) -> SimulationResult:
    """Play *sessions* complete sessions and report aggregate statistics."""
    cfg = config or GameConfig()
    rng = np.random.default_rng(seed)
    scores: list[int] = []
    total_ticks = 0
    total_eaten = 0

    start = time.perf_counter()
    for _ in range(sessions):
        engine = GameEngine(cfg, now=0.0, seed=int(rng.integers(2**31)))
        ticks, eaten = run_session(engine, rng, max_ticks=max_ticks, show=show)
        total_ticks += ticks
        total_eaten += eaten
        scores.append(engine.session.score)
    elapsed = time.perf_counter() - start

    result = SimulationResult(
        sessions=sessions,
        total_ticks=total_ticks,
        food_eaten=total_eaten,
        best_score=max(scores, default=0),
        mean_score=float(np.mean(scores)) if scores else 0.0,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
