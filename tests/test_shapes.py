from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from block_puzzle.game import SequenceRandomSource, ShapeCatalog, UniformRandomSource, make_shape, shape_cells


def test_catalog_has_eight_distinct_blocks() -> None:
    blocks = ShapeCatalog.all()
    assert len(blocks) == 8
    assert len({b.block_id for b in blocks}) == 8
    assert all(b.block_id > 0 for b in blocks)
    assert ShapeCatalog.get("square").shape == ((True, True), (True, True))
    assert ShapeCatalog.get("vline3").cells() == [(0, 0), (1, 0), (2, 0)]


def test_blocks_are_immutable() -> None:
    block = ShapeCatalog.get("t")
    with pytest.raises(FrozenInstanceError):
        block.color = "#000000"  # type: ignore[misc]
    assert isinstance(block.shape, tuple)


def test_ragged_shapes_are_allowed() -> None:
    shape = make_shape([[1], [0, 1, 1]])
    assert shape_cells(shape) == [(0, 0), (1, 1), (1, 2)]


def test_pick_random_uses_injected_source() -> None:
    source = SequenceRandomSource([3, 0, 7, 9])
    picked = [ShapeCatalog.pick_random(source).name for _ in range(4)]
    assert picked == ["line4", "square", "l_wide", "line3"]


def test_uniform_source_is_reproducible_with_seed() -> None:
    a = UniformRandomSource(42)
    b = UniformRandomSource(42)
    assert [a.next_index(8) for _ in range(20)] == [b.next_index(8) for _ in range(20)]
    assert all(0 <= UniformRandomSource(1).next_index(8) < 8 for _ in range(50))


def test_color_lookup() -> None:
    assert ShapeCatalog.color_for(1) == "#ff6b6b"
    assert ShapeCatalog.color_for(0) is None


def test_lookup_by_id_matches_catalog() -> None:
    for block in ShapeCatalog.all():
        assert ShapeCatalog.by_id(block.block_id) is block
    with pytest.raises(KeyError):
        ShapeCatalog.by_id(0)
