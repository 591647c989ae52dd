from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .clears import NO_CLEAR, ClearDetector, LineClear
from .grid import Board, format_grid
from .queue import BlockQueue
from .random_source import RandomSource, UniformRandomSource
from .rules import ScoreTracker, ScoringRules
from .shapes import BlockDefinition


logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    grid_size: int = 8
    queue_size: int = 3
    line_clear_points: int = 200
    random_seed: Optional[int] = None
    max_episode_steps: int = 10000

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive")
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")
        if self.line_clear_points < 0:
            raise ValueError("line_clear_points cannot be negative")


class EngineState(Enum):
    IDLE = "idle"
    SELECTED = "selected"


@dataclass(frozen=True)
class PlacementResult:
    accepted: bool
    clear_event: LineClear = NO_CLEAR
    score_delta: int = 0


REJECTED = PlacementResult(accepted=False)


class GameEngine:
    """One block puzzle session.

    All state changes go through ``select`` and ``attempt_placement``; the
    accessors hand out copies so callers cannot write into the board or queue.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        random_source: Optional[RandomSource] = None,
        rules: Optional[ScoringRules] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.random_source = random_source or UniformRandomSource(self.config.random_seed)
        self.board = Board(self.config.grid_size)
        self.scores = ScoreTracker(rules or ScoringRules(self.config.line_clear_points))
        self.queue = BlockQueue(self.random_source, self.config.queue_size)
        self.pieces_placed = 0

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.random_source.seed(seed)
        self.board.reset()
        self.scores.reset()
        self.queue.fill()
        self.pieces_placed = 0

    # Read-only state

    def get_board(self) -> np.ndarray:
        return self.board.snapshot()

    def get_queue(self) -> Tuple[BlockDefinition, ...]:
        return self.queue.snapshot()

    def get_score(self) -> int:
        return self.scores.score

    @property
    def state(self) -> EngineState:
        return EngineState.IDLE if self.queue.selected is None else EngineState.SELECTED

    @property
    def selected_slot(self) -> Optional[int]:
        return self.queue.selected

    @property
    def selected_block(self) -> Optional[BlockDefinition]:
        return self.queue.selected_block

    # Actions

    def select(self, slot: int) -> bool:
        """Choose the queue slot to place next. Out-of-range slots are ignored."""
        return self.queue.select(slot)

    def attempt_placement(self, row: int, col: int) -> PlacementResult:
        block = self.queue.selected_block
        if block is None:
            logger.debug("Placement at (%d, %d) ignored: no block selected", row, col)
            return REJECTED
        if not self.board.place(row, col, block):
            logger.debug("Rejected %s at (%d, %d)", block.name, row, col)
            return REJECTED

        self.pieces_placed += 1
        clear = ClearDetector.detect(self.board)
        gained = 0
        if clear:
            ClearDetector.apply(self.board, clear)
            gained = self.scores.award(len(clear.rows), len(clear.cols))
        self.queue.replenish()
        logger.debug("Placed %s at (%d, %d), score %d", block.name, row, col, self.scores.score)
        return PlacementResult(accepted=True, clear_event=clear, score_delta=gained)

    # Move analysis

    def valid_placements(self) -> List[Tuple[int, int, int]]:
        """List of (slot, row, col) placements the board currently accepts."""
        moves: List[Tuple[int, int, int]] = []
        for slot, block in enumerate(self.queue.blocks):
            for row, col in self.board.valid_anchors(block.shape):
                moves.append((slot, row, col))
        return moves

    def has_valid_placement(self) -> bool:
        return any(self.board.fits_anywhere(block.shape) for block in self.queue.blocks)

    def is_game_over(self) -> bool:
        return not self.has_valid_placement()

    def get_state(self) -> dict:
        return {
            "grid": self.board.grid.copy(),
            "queue": [block.block_id for block in self.queue.blocks],
            "selected": self.queue.selected,
            "score": self.scores.score,
            "lines_cleared": self.scores.lines_cleared,
            "pieces_placed": self.pieces_placed,
            "filled_ratio": self.board.filled_ratio(),
        }

    def format_grid(self) -> str:
        return format_grid(self.board.grid)
