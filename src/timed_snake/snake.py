"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from timed_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal headings with (col_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_reverse_of(self, other: Direction) -> bool:
        return self.opposite is other


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (col, row) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Segment order
    encodes the body's shape, so it is only ever changed through
    :meth:`advance`.
    """

    def __init__(
        self,
        start_col: int,
        start_row: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dc, dr = direction.value
        self.body: deque[Cell] = deque(
            (start_col - dc * i, start_row - dr * i) for i in range(length)
        )
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def set_direction(self, new_direction: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if not new_direction.is_reverse_of(self.direction):
            self.direction = new_direction

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dc, dr = self.direction.value
        col, row = self.head
        return col + dc, row + dr

    def advance(self, grow: bool = False) -> Cell | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if grow:
            return None
        return self.body.pop()

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
