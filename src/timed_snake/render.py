"""Presentation helpers derived from read-only engine state.

Nothing here mutates the engine. The pygame host and the text renderer
both build on these functions, so they can be tested without a display.
"""

from __future__ import annotations

from collections.abc import Sequence

from timed_snake.config import GameConfig
from timed_snake.food import FoodItem
from timed_snake.grid import Cell
from timed_snake.session import SessionState
from timed_snake.snake import Direction

GAME_OVER_TEXT = "Game Over! Press Space to restart."

# Sprites face down; angles are counter-clockwise degrees.
_ANGLES: dict[Direction, float] = {
    Direction.DOWN: 0.0,
    Direction.UP: 180.0,
    Direction.LEFT: -90.0,
    Direction.RIGHT: 90.0,
}
_BY_DELTA: dict[tuple[int, int], Direction] = {d.value: d for d in Direction}


def head_angle(direction: Direction) -> float:
    """Rotation for the head sprite facing *direction*."""
    return _ANGLES[direction]


def segment_angles(body: Sequence[Cell], direction: Direction) -> list[float]:
    """Rotation for every segment, head first.

    A body segment points from itself towards the segment before it.
    """
    angles = [head_angle(direction)] if body else []
    for prev, curr in zip(body, list(body)[1:]):
        delta = (prev[0] - curr[0], prev[1] - curr[1])
        heading = _BY_DELTA.get(delta)
        angles.append(_ANGLES[heading] if heading is not None else 0.0)
    return angles


def food_visible(item: FoodItem, now: float, config: GameConfig | None = None) -> bool:
    """Whether *item* is drawn this frame.

    Items blink every ``flash_period`` during their final
    ``expiry_warning`` seconds.
    """
    cfg = config or GameConfig()
    if not item.is_expiring(now, cfg.expiry_warning):
        return True
    elapsed_ms = round(item.elapsed(now) * 1000)
    period_ms = max(1, round(cfg.flash_period * 1000))
    return (elapsed_ms // period_ms) % 2 == 0


def hud_text(session: SessionState) -> str:
    return f"Score: {session.score}  Lives: {session.lives}"


def render_text(state: dict) -> str:
    """Draw a state dict from :meth:`GameEngine.get_state` as ASCII."""
    width = state["grid"]["width"]
    height = state["grid"]["height"]
    rows = [["."] * width for _ in range(height)]

    for item in state["food"]["items"]:
        col, row = item["position"]
        rows[row][col] = "*"
    for i, (col, row) in enumerate(state["snake"]["body"]):
        if 0 <= col < width and 0 <= row < height:
            rows[row][col] = "@" if i == 0 else "o"

    lines = [f"Score: {state['score']}  Lives: {state['lives']}"]
    lines.extend("".join(r) for r in rows)
    if state["phase"] == "game_over":
        lines.append(GAME_OVER_TEXT)
    return "\n".join(lines)
