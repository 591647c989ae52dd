from __future__ import annotations

import logging

from block_puzzle.game import Board, ClearDetector


def test_no_full_lines_means_no_clear() -> None:
    board = Board()
    board.grid[0, :7] = 1
    clear = ClearDetector.detect(board)
    assert not clear
    assert clear.lines == 0
    assert clear.cells == ()


def test_row_and_column_are_detected_together() -> None:
    board = Board()
    board.grid[2, :] = 1
    board.grid[:, 6] = 1
    clear = ClearDetector.detect(board)
    assert clear.rows == (2,)
    assert clear.cols == (6,)
    # intersection reported once
    assert len(clear.cells) == 15
    assert len(set(clear.cells)) == 15
    assert (2, 6) in clear.cells

    ClearDetector.apply(board, clear)
    assert board.filled_cells() == 0


def test_multiple_rows_clear_in_one_pass() -> None:
    board = Board()
    board.grid[0, :] = 1
    board.grid[1, :] = 2
    board.grid[3, 0] = 4
    clear = ClearDetector.detect(board)
    assert clear.rows == (0, 1)
    assert clear.lines == 2
    ClearDetector.apply(board, clear)
    assert board.filled_cells() == 1


def test_clear_is_logged(caplog) -> None:
    board = Board()
    board.grid[4, :] = 1
    with caplog.at_level(logging.INFO, logger="block_puzzle.game.clears"):
        ClearDetector.apply(board, ClearDetector.detect(board))
    assert "Cleared rows [4]" in "".join(caplog.messages)
