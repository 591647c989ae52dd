from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .random_source import RandomSource
from .shapes import BlockDefinition, ShapeCatalog


logger = logging.getLogger(__name__)


class BlockQueue:
    """Fixed-size lookahead of the next placeable blocks."""

    def __init__(self, random_source: RandomSource, capacity: int = 3) -> None:
        self.random_source = random_source
        self.capacity = capacity
        self.blocks: List[BlockDefinition] = []
        self.selected: Optional[int] = None
        self.fill()

    def fill(self) -> None:
        """Replace the whole queue with fresh random blocks."""
        self.blocks = [ShapeCatalog.pick_random(self.random_source) for _ in range(self.capacity)]
        self.selected = None

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, slot: int) -> BlockDefinition:
        return self.blocks[slot]

    def snapshot(self) -> Tuple[BlockDefinition, ...]:
        return tuple(self.blocks)

    def select(self, slot: int) -> bool:
        if not 0 <= slot < len(self.blocks):
            return False
        self.selected = slot
        return True

    def clear_selection(self) -> None:
        self.selected = None

    @property
    def selected_block(self) -> Optional[BlockDefinition]:
        if self.selected is None:
            return None
        return self.blocks[self.selected]

    def replenish(self) -> BlockDefinition:
        """Drop the front block, append a new random one and clear the selection.

        The replacement list is built first so the queue is never observed
        shorter than its capacity.
        """
        new_block = ShapeCatalog.pick_random(self.random_source)
        self.blocks = self.blocks[1:] + [new_block]
        self.selected = None
        logger.debug("Queue replenished with %s: %s", new_block.name, [b.name for b in self.blocks])
        return new_block
