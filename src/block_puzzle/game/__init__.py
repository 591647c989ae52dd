"""Game module for Block Puzzle.

Exports the core engine and supporting classes:
- ShapeCatalog / BlockDefinition: the 8 fixed blocks and their colours
- RandomSource: injectable block picker (uniform or fixed sequence)
- Board: grid representation and placement checks
- ClearDetector / LineClear: simultaneous row and column clears
- ScoringRules / ScoreTracker: flat per-line scoring
- BlockQueue: the 3-block lookahead
- GameEngine: selection, placement and state access
"""

from .shapes import BlockDefinition, ShapeCatalog, make_shape, shape_cells
from .random_source import RandomSource, SequenceRandomSource, UniformRandomSource
from .grid import Board, format_grid
from .clears import ClearDetector, LineClear
from .rules import ScoreTracker, ScoringRules
from .queue import BlockQueue
from .core import EngineState, GameConfig, GameEngine, PlacementResult

__all__ = [
    "BlockDefinition",
    "ShapeCatalog",
    "make_shape",
    "shape_cells",
    "RandomSource",
    "SequenceRandomSource",
    "UniformRandomSource",
    "Board",
    "format_grid",
    "ClearDetector",
    "LineClear",
    "ScoreTracker",
    "ScoringRules",
    "BlockQueue",
    "EngineState",
    "GameConfig",
    "GameEngine",
    "PlacementResult",
]
