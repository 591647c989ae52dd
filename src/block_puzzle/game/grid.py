from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from .shapes import BlockDefinition, Shape, shape_cells


Coordinate = Tuple[int, int]

EMPTY = 0


class Board:
    """Square grid of block cells.

    The grid uses 0 for empty cells and a block id for filled cells, so the
    colour of a cell can be recovered from the shape catalog.
    """

    def __init__(self, size: int = 8) -> None:
        self.size = int(size)
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> int:
        """Return the block id at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.is_inside(row, col):
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell is empty.

        Off-board coordinates count as occupied so that bounds and collision
        checks collapse into one test.
        """
        if self.is_inside(row, col):
            return bool(self.grid[row, col] == EMPTY)
        return False

    def target_cells(self, row: int, col: int, shape: Shape) -> List[Coordinate]:
        return [(row + i, col + j) for i, j in shape_cells(shape)]

    def can_place(self, row: int, col: int, shape: Shape) -> bool:
        """Check the whole shape against the current grid without writing."""
        for r, c in self.target_cells(row, col, shape):
            if not self.is_empty(r, c):
                return False
        return True

    def place(self, row: int, col: int, block: BlockDefinition) -> bool:
        """Write ``block`` at the anchor; returns ``False`` and writes nothing if it does not fit."""
        if not self.can_place(row, col, block.shape):
            return False
        for r, c in self.target_cells(row, col, block.shape):
            self.grid[r, c] = block.block_id
        return True

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row, :] != EMPTY))

    def is_col_full(self, col: int) -> bool:
        return bool(np.all(self.grid[:, col] != EMPTY))

    def clear_row(self, row: int) -> None:
        self.grid[row, :] = EMPTY

    def clear_col(self, col: int) -> None:
        self.grid[:, col] = EMPTY

    def candidate_anchors(self, shape: Shape) -> Iterator[Coordinate]:
        """Every anchor that could keep ``shape`` on the board.

        Anchors start below zero when a shape's leading rows or columns are empty.
        """
        height = len(shape)
        width = max((len(row) for row in shape), default=0)
        for row in range(1 - height, self.size):
            for col in range(1 - width, self.size):
                yield row, col

    def valid_anchors(self, shape: Shape) -> List[Coordinate]:
        """All (row, col) anchors at which ``shape`` fits."""
        return [(row, col) for row, col in self.candidate_anchors(shape) if self.can_place(row, col, shape)]

    def fits_anywhere(self, shape: Shape) -> bool:
        return any(self.can_place(row, col, shape) for row, col in self.candidate_anchors(shape))

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def filled_ratio(self) -> float:
        return self.filled_cells() / float(self.size * self.size)

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid."""
        view = self.grid.copy()
        view.flags.writeable = False
        return view


def format_grid(grid: np.ndarray) -> str:
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in grid)
