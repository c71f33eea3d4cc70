"""
Core Wang tile functionality.

This package contains the packed WangId type, the WangSet registry and
matcher, and the tile, tileset and layer primitives they operate on.
"""

from .tile_layer import TileLayer
from .tileset import Tile, Tileset
from .wang_id import WangId
from .wang_set import WangSet, WangSetError

__all__ = [
    "TileLayer",
    "Tile",
    "Tileset",
    "WangId",
    "WangSet",
    "WangSetError",
]
