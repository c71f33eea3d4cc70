"""
Integration tests for Wang fill over tile layers.

Fills regions with a complete 2-color edge set (one tile per combination)
and checks that every placed tile agrees with its neighbors.
"""

import logging
import random

import pytest

from editor.algorithms.wang_fill import FillResult, WangFiller
from wang.core.tile_layer import TileLayer
from wang.core.tileset import Tileset
from wang.core.wang_id import WangId
from wang.core.wang_set import WangSet


def edges(top: int, right: int, bottom: int, left: int) -> WangId:
    """WangId with only edge colors set."""
    return WangId.from_colors(edges=(top, right, bottom, left))


def region(width: int, height: int, x0: int = 0, y0: int = 0) -> list[tuple[int, int]]:
    """All positions of a rectangle."""
    return [(x, y) for y in range(y0, y0 + height) for x in range(x0, x0 + width)]


def assert_edges_agree(wang_set: WangSet, layer: TileLayer):
    """Every pair of adjacent placed tiles shares the color on their common edge."""
    for x, y, tile in layer.cells():
        wang_id = wang_set.wang_id_of(tile)
        right = layer.cell_at(x + 1, y)
        if right is not None:
            assert wang_id.edge_color(1) == wang_set.wang_id_of(right).edge_color(3)
        below = layer.cell_at(x, y + 1)
        if below is not None:
            assert wang_id.edge_color(2) == wang_set.wang_id_of(below).edge_color(0)


def merge(background: TileLayer, stamp: TileLayer) -> TileLayer:
    """Overlay stamp tiles on a copy of the background."""
    merged = background.copy()
    for x, y, tile in stamp.cells():
        merged.set_cell(x, y, tile)
    return merged


@pytest.fixture
def filler(complete_edge_set):
    return WangFiller(complete_edge_set)


class TestFillRegion:
    """Tests for filling empty and partially filled layers."""

    def test_fills_empty_layer_consistently(self, filler, complete_edge_set, rng):
        background = TileLayer(5, 4)
        result = filler.fill_region(background, region(5, 4), rng)

        assert isinstance(result, FillResult)
        assert result.count == 20
        assert result.unmatched == []
        assert_edges_agree(complete_edge_set, result.stamp)
        assert background.is_empty()

    def test_visits_cells_row_major(self, filler, rng):
        positions = [(2, 1), (0, 0), (1, 1), (2, 0)]
        result = filler.fill_region(TileLayer(3, 2), positions, rng)
        assert result.placed == [(0, 0), (2, 0), (1, 1), (2, 1)]

    def test_respects_background_neighbors(self, filler, complete_edge_set, rng):
        background = TileLayer(3, 3)
        fixed = complete_edge_set.find_matching_tiles(edges(1, 2, 2, 1))[0]
        for x, y in [(0, 0), (2, 0), (0, 2), (2, 2)]:
            background.set_cell(x, y, fixed)

        result = filler.fill_region(background, [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)], rng)

        assert result.count == 5
        assert_edges_agree(complete_edge_set, merge(background, result.stamp))

    def test_region_content_is_replaced(self, filler, complete_edge_set, rng):
        """Background tiles inside the region do not constrain the fill."""
        background = TileLayer(2, 1)
        stale = complete_edge_set.find_matching_tiles(edges(1, 1, 1, 1))[0]
        background.set_cell(0, 0, stale)
        background.set_cell(1, 0, stale)

        result = filler.fill_region(background, [(0, 0)], rng)

        placed = result.stamp.cell_at(0, 0)
        assert complete_edge_set.wang_id_of(placed).edge_color(1) == 1
        assert result.stamp.cell_at(1, 0) is None

    def test_positions_outside_layer_ignored(self, filler, rng):
        result = filler.fill_region(TileLayer(2, 2), [(0, 0), (5, 5), (-1, 0)], rng)
        assert result.placed == [(0, 0)]
        assert result.unmatched == []

    def test_duplicate_positions_filled_once(self, filler, rng):
        result = filler.fill_region(TileLayer(2, 2), [(1, 1), (1, 1)], rng)
        assert result.placed == [(1, 1)]

    def test_same_seed_same_fill(self, filler):
        first = filler.fill_region(TileLayer(4, 4), region(4, 4), random.Random(7))
        second = filler.fill_region(TileLayer(4, 4), region(4, 4), random.Random(7))
        assert [tile.id for _, _, tile in first.stamp.cells()] == [
            tile.id for _, _, tile in second.stamp.cells()
        ]


class TestUnmatched:
    """Tests for cells the filler cannot place."""

    def test_without_wang_set(self):
        result = WangFiller().fill_region(TileLayer(2, 2), region(2, 2))
        assert result.count == 0
        assert result.unmatched == []
        assert result.stamp.is_empty()

    def test_empty_region(self, filler):
        result = filler.fill_region(TileLayer(2, 2), [])
        assert result.count == 0
        assert (result.stamp.width, result.stamp.height) == (2, 2)

    def test_empty_wang_set_leaves_cells_empty(self, rng):
        tileset = Tileset("empty")
        filler = WangFiller(WangSet(tileset, 2, 0))
        result = filler.fill_region(TileLayer(2, 2), region(2, 2), rng)
        assert result.placed == []
        assert result.unmatched == region(2, 2)
        assert result.stamp.is_empty()

    def test_missing_combination_reported(self, rng):
        """Only uniform tiles exist, so a cell between two colors cannot be placed."""
        tileset = Tileset("uniform")
        wang_set = WangSet(tileset, 2, 0)
        one, two = tileset.create_tiles(2)
        wang_set.add_tile(one, edges(1, 1, 1, 1))
        wang_set.add_tile(two, edges(2, 2, 2, 2))

        background = TileLayer(3, 1)
        background.set_cell(0, 0, one)
        background.set_cell(2, 0, two)

        result = WangFiller(wang_set).fill_region(background, [(1, 0)], rng)
        assert result.unmatched == [(1, 0)]
        assert result.stamp.is_empty()

    def test_combination_limit(self, complete_edge_set, rng, caplog):
        filler = WangFiller(complete_edge_set, max_combinations=8)
        background = TileLayer(3, 1)
        background.set_cell(0, 0, complete_edge_set.find_matching_tiles(edges(1, 1, 1, 1))[0])

        with caplog.at_level(logging.WARNING, logger="editor.algorithms.wang_fill"):
            result = filler.fill_region(background, [(1, 0), (2, 0)], rng)
            isolated = filler.fill_region(TileLayer(1, 1), [(0, 0)], rng)

        # (1, 0) has a left neighbor: 3 wildcards, 8 candidates. (2, 0) then
        # has (1, 0) as its left neighbor and also stays within the limit.
        assert result.placed == [(1, 0), (2, 0)]
        assert isolated.unmatched == [(0, 0)]
        assert "expands to 16 candidates" in caplog.text
