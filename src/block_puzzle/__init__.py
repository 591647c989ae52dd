"""Block Puzzle: an 8x8 block placement engine with row and column clears."""

from .game import (
    BlockDefinition,
    Board,
    ClearDetector,
    GameConfig,
    GameEngine,
    LineClear,
    PlacementResult,
    ShapeCatalog,
)

__all__ = [
    "BlockDefinition",
    "Board",
    "ClearDetector",
    "GameConfig",
    "GameEngine",
    "LineClear",
    "PlacementResult",
    "ShapeCatalog",
]
