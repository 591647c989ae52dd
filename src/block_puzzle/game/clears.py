from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .grid import Board, Coordinate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineClear:
    """Rows and columns completed by one placement, and the cells they cover."""

    rows: Tuple[int, ...] = ()
    cols: Tuple[int, ...] = ()
    cells: Tuple[Coordinate, ...] = ()

    @property
    def lines(self) -> int:
        return len(self.rows) + len(self.cols)

    def __bool__(self) -> bool:
        return self.lines > 0


NO_CLEAR = LineClear()


class ClearDetector:
    """Finds and removes full rows and columns.

    Detection runs over the whole post-placement grid before anything is
    zeroed, so a row and a column completed together are both reported.
    """

    @staticmethod
    def detect(board: Board) -> LineClear:
        rows = tuple(r for r in range(board.size) if board.is_row_full(r))
        cols = tuple(c for c in range(board.size) if board.is_col_full(c))
        if not rows and not cols:
            return NO_CLEAR

        cells = [(r, c) for r in rows for c in range(board.size)]
        row_set = set(rows)
        for c in cols:
            cells.extend((r, c) for r in range(board.size) if r not in row_set)
        return LineClear(rows=rows, cols=cols, cells=tuple(cells))

    @staticmethod
    def apply(board: Board, clear: LineClear) -> None:
        for r in clear.rows:
            board.clear_row(r)
        for c in clear.cols:
            board.clear_col(c)
        if clear:
            logger.info("Cleared rows %s and cols %s (%d cells)", list(clear.rows), list(clear.cols), len(clear.cells))
