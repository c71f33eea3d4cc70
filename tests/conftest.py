"""Shared pytest fixtures for Wang tile tests."""

import itertools
import random

import pytest

from wang.core.tile_layer import TileLayer
from wang.core.tileset import Tileset
from wang.core.wang_id import WangId
from wang.core.wang_set import WangSet


@pytest.fixture
def tileset():
    """Tileset with 8 tiles (ids 0-7)."""
    tileset = Tileset("terrain")
    tileset.create_tiles(8)
    return tileset


@pytest.fixture
def rng():
    """Seeded random source for reproducible picks."""
    return random.Random(12345)


@pytest.fixture
def edge_set(tileset):
    """Empty edge-only Wang set with 2 edge colors."""
    return WangSet(tileset, edge_colors=2, corner_colors=0, name="edges", rng=random.Random(1))


@pytest.fixture
def corner_set(tileset):
    """Empty corner-only Wang set with 2 corner colors."""
    return WangSet(tileset, edge_colors=0, corner_colors=2, name="corners", rng=random.Random(1))


@pytest.fixture
def complete_edge_set():
    """Edge-only Wang set with one tile for each of the 16 complete combinations."""
    tileset = Tileset("complete")
    wang_set = WangSet(tileset, edge_colors=2, corner_colors=0, name="complete", rng=random.Random(1))
    for colors in itertools.product((1, 2), repeat=4):
        wang_set.add_tile(tileset.add_tile(), WangId.from_colors(edges=colors))
    return wang_set


@pytest.fixture
def layer_3x3():
    """Empty 3x3 tile layer."""
    return TileLayer(3, 3)
