"""Grid coordinate space for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class Grid:
    """Fixed-size board of ``width`` x ``height`` cells.

    Cells are ``(col, row)`` pairs with the origin in the top-left corner.
    The grid itself holds no game state; occupancy is computed on demand
    from the cells passed in.
    """

    def __init__(self, width: int = 13, height: int = 10) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within ``[0, width) x [0, height)``."""
        col, row = cell
        return 0 <= col < self.width and 0 <= row < self.height

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Draw a uniformly random cell."""
        col = int(rng.integers(self.width))
        row = int(rng.integers(self.height))
        return col, row

    def occupancy(self, occupied: Iterable[Cell]) -> np.ndarray:
        """Return a boolean ``(height, width)`` mask of occupied cells."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for col, row in occupied:
            if self.in_bounds((col, row)):
                mask[row, col] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every cell not present in *occupied*, in row-major order."""
        rows, cols = np.where(~self.occupancy(occupied))
        return list(zip(cols.tolist(), rows.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
