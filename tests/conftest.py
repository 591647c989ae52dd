from __future__ import annotations

from typing import Callable, Sequence

import pytest

from block_puzzle.game import GameEngine, SequenceRandomSource, ShapeCatalog


def block_index(name: str) -> int:
    return ShapeCatalog.all().index(ShapeCatalog.get(name))


@pytest.fixture
def make_engine() -> Callable[..., GameEngine]:
    """Engine whose queue is drawn from the named blocks, cycling."""

    def _make(*names: str) -> GameEngine:
        indices: Sequence[int] = [block_index(n) for n in names] or [0]
        return GameEngine(random_source=SequenceRandomSource(indices))

    return _make
