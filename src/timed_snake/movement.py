"""Single-tick snake movement, collision detection and food consumption."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from timed_snake.food import FoodItem, FoodManager
from timed_snake.grid import Cell, Grid
from timed_snake.snake import Snake


class CollisionOutcome(enum.Enum):
    """What the head ran into on the attempted move."""

    NONE = "none"
    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one attempted move."""

    collision: CollisionOutcome
    head: Cell
    eaten: FoodItem | None = None

    @property
    def collided(self) -> bool:
        return self.collision is not CollisionOutcome.NONE

    @property
    def grew(self) -> bool:
        return self.eaten is not None


def advance_snake(snake: Snake, grid: Grid, food: FoodManager) -> MoveResult:
    """Move *snake* one cell along its heading.

    Boundary and self checks run before anything is mutated; on a
    collision the snake and food are left untouched. Otherwise the new
    head is prepended, food under it is consumed, and the tail is kept
    only if food was eaten.
    """
    new_head = snake.next_head()

    if not grid.in_bounds(new_head):
        return MoveResult(CollisionOutcome.WALL, new_head)

    # The tail still counts: it has not moved away yet.
    if snake.occupies(new_head):
        return MoveResult(CollisionOutcome.SELF, new_head)

    eaten = food.consume(new_head)
    snake.advance(grow=eaten is not None)
    return MoveResult(CollisionOutcome.NONE, new_head, eaten)
