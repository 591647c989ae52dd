from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .random_source import RandomSource


Shape = Tuple[Tuple[bool, ...], ...]
Offset = Tuple[int, int]


def make_shape(rows: Sequence[Sequence[int]]) -> Shape:
    """Freeze a nested list of 0/1 values into an immutable shape.

    Rows may have different lengths.
    """
    return tuple(tuple(bool(cell) for cell in row) for row in rows)


def shape_cells(shape: Shape) -> List[Offset]:
    """Return the occupied (row, col) offsets of a shape, row-major."""
    cells: List[Offset] = []
    for i, row in enumerate(shape):
        for j, filled in enumerate(row):
            if filled:
                cells.append((i, j))
    return cells


@dataclass(frozen=True)
class BlockDefinition:
    """A placeable block: shape plus the colour used to paint it."""

    name: str
    color: str
    shape: Shape
    block_id: int

    def cells(self) -> List[Offset]:
        return shape_cells(self.shape)


def _define(block_id: int, name: str, color: str, rows: Sequence[Sequence[int]]) -> BlockDefinition:
    return BlockDefinition(name=name, color=color, shape=make_shape(rows), block_id=block_id)


# Grid cells store ``block_id``; 0 is reserved for empty cells.
BLOCKS: Tuple[BlockDefinition, ...] = (
    _define(1, "square", "#ff6b6b", [[1, 1], [1, 1]]),
    _define(2, "line3", "#4dabf7", [[1, 1, 1]]),
    _define(3, "l_small", "#51cf66", [[1, 0], [1, 1]]),
    _define(4, "line4", "#ffa94d", [[1, 1, 1, 1]]),
    _define(5, "z", "#845ef7", [[1, 1, 0], [0, 1, 1]]),
    _define(6, "t", "#f06595", [[1, 1, 1], [0, 1, 0]]),
    _define(7, "vline3", "#20c997", [[1], [1], [1]]),
    _define(8, "l_wide", "#ffd43b", [[1, 1, 1], [1, 0, 0]]),
)


class ShapeCatalog:
    """Static block definitions"""

    BLOCKS = BLOCKS
    _BY_NAME: Dict[str, BlockDefinition] = {b.name: b for b in BLOCKS}
    _BY_ID: Dict[int, BlockDefinition] = {b.block_id: b for b in BLOCKS}

    @classmethod
    def all(cls) -> Tuple[BlockDefinition, ...]:
        return cls.BLOCKS

    @classmethod
    def get(cls, name: str) -> BlockDefinition:
        """Look up a block by name. Raises KeyError for unknown names."""
        return cls._BY_NAME[name]

    @classmethod
    def by_id(cls, block_id: int) -> BlockDefinition:
        return cls._BY_ID[block_id]

    @classmethod
    def color_for(cls, block_id: int) -> str | None:
        """Colour of the block stored in a grid cell, ``None`` for empty cells."""
        if int(block_id) not in cls._BY_ID:
            return None
        return cls.by_id(int(block_id)).color

    @classmethod
    def pick_random(cls, random_source: RandomSource) -> BlockDefinition:
        """Return one definition chosen uniformly through ``random_source``."""
        return cls.BLOCKS[random_source.next_index(len(cls.BLOCKS))]
