"""
Wang Tiles - Wang Set

Binds tiles of one tileset to packed Wang identifiers and answers
"which tiles fit here?" queries, expanding wildcard slots into every
concrete color they could take.
"""

import itertools
import logging
import math
import random
from typing import Iterator

from .constants import CORNER_SOURCES, EDGE_SOURCES, MAX_COLOR_COUNT, SLOT_BITS
from .tile_layer import TileLayer
from .tileset import Tile, Tileset
from .wang_id import WangId, corner_offset, edge_offset

logger = logging.getLogger(__name__)


class WangSetError(ValueError):
    """Raised when a Wang set is configured or populated inconsistently."""

    pass


class WangSet:
    """
    Registry of tiles keyed by WangId for one autotiling ruleset.

    Several tiles may share one WangId; they are alternative variants of
    the same pattern and are kept in registration order. The reverse map
    holds the most recent WangId assigned to each tile.

    The set is not thread-safe. Callers sharing one instance across
    threads must serialize access themselves.
    """

    def __init__(
        self,
        tileset: Tileset,
        edge_colors: int,
        corner_colors: int,
        name: str = "",
        image_tile_id: int = -1,
        rng: random.Random | None = None,
    ):
        """
        Create an empty Wang set.

        Args:
            tileset: Tileset whose tiles may be registered in this set
            edge_colors: Number of edge colors (0 disables edge matching)
            corner_colors: Number of corner colors (0 disables corner matching)
            name: Display name
            image_tile_id: Id of the tile used to preview this set in the UI
            rng: Random source for find_matching_tile. Defaults to a fresh
                random.Random instance owned by this set.

        Raises:
            WangSetError: If a color count is outside 0-15
        """
        for kind, count in (("edge", edge_colors), ("corner", corner_colors)):
            if not 0 <= count <= MAX_COLOR_COUNT:
                raise WangSetError(
                    f"Invalid {kind} color count {count}. Must be 0-{MAX_COLOR_COUNT}"
                )

        self.tileset = tileset
        self.name = name
        self.image_tile_id = image_tile_id
        self._edge_colors = edge_colors
        self._corner_colors = corner_colors
        self._rng = rng if rng is not None else random.Random()

        self._wang_id_to_tiles: dict[WangId, list[Tile]] = {}
        self._tile_id_to_wang_id: dict[int, WangId] = {}

    @property
    def edge_colors(self) -> int:
        return self._edge_colors

    @property
    def corner_colors(self) -> int:
        return self._corner_colors

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_tile(self, tile: Tile, wang_id: "WangId | int"):
        """
        Register a tile under a WangId.

        The same (tile, id) pair may be added more than once; each add is
        kept. Re-registering a tile under a different id updates the
        tile's reverse lookup but leaves the earlier id's entry in place.

        Args:
            tile: Tile owned by this set's tileset
            wang_id: Identifier whose slots respect this set's color counts

        Raises:
            WangSetError: If the tile belongs to another tileset or a slot
                exceeds its color count. Nothing is modified in that case.
        """
        wang_id = WangId(wang_id)

        if tile.tileset is not self.tileset:
            raise WangSetError(
                f"Tile {tile.id} belongs to tileset {tile.tileset.name!r}, "
                f"not {self.tileset.name!r}"
            )

        for direction in range(4):
            color = wang_id.edge_color(direction)
            if color > self._edge_colors:
                raise WangSetError(
                    f"Edge color {color} at direction {direction} of {wang_id!r} "
                    f"exceeds edge color count {self._edge_colors}"
                )

        for direction in range(4):
            color = wang_id.corner_color(direction)
            if color > self._corner_colors:
                raise WangSetError(
                    f"Corner color {color} at direction {direction} of {wang_id!r} "
                    f"exceeds corner color count {self._corner_colors}"
                )

        self._wang_id_to_tiles.setdefault(wang_id, []).append(tile)
        self._tile_id_to_wang_id[tile.id] = wang_id
        logger.debug(f"{self.name}: tile {tile.id} -> {wang_id!r}")

    def wang_id_of(self, tile: Tile | None) -> WangId:
        """
        Look up the WangId of a tile.

        Returns:
            The tile's registered WangId, or WangId(0) if the tile is None,
            unregistered, or owned by another tileset
        """
        if tile is None or tile.tileset is not self.tileset:
            return WangId(0)
        return self._tile_id_to_wang_id.get(tile.id, WangId(0))

    def tiles_for(self, wang_id: "WangId | int") -> list[Tile]:
        """Tiles registered under exactly this WangId (no wildcard expansion)."""
        return list(self._wang_id_to_tiles.get(WangId(wang_id), ()))

    def wang_ids(self) -> list[WangId]:
        """Registered WangIds in first-registration order."""
        return list(self._wang_id_to_tiles)

    def tile_count(self) -> int:
        """Number of distinct tiles with a registered WangId."""
        return len(self._tile_id_to_wang_id)

    def __len__(self) -> int:
        return sum(len(tiles) for tiles in self._wang_id_to_tiles.values())

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def _slot_color_count(self, slot: int) -> int:
        return self._corner_colors if slot % 2 else self._edge_colors

    def candidate_count(self, wang_id: "WangId | int") -> int:
        """Number of concrete ids find_matching_tiles would look up."""
        slots = WangId(wang_id).wildcard_slots(self._edge_colors, self._corner_colors)
        return math.prod(self._slot_color_count(slot) for slot in slots)

    def iter_candidate_ids(self, wang_id: "WangId | int") -> Iterator[WangId]:
        """
        Expand wildcard slots into every concrete WangId they allow.

        Each wildcard slot of a kind with a positive color count takes
        every color 1..count. The last wildcard slot varies fastest.
        Without wildcards, yields the id itself.

        Args:
            wang_id: Query id, where 0 slots are wildcards

        Yields:
            Concrete WangIds, one per combination
        """
        wang_id = WangId(wang_id)
        slots = wang_id.wildcard_slots(self._edge_colors, self._corner_colors)

        if not slots:
            yield wang_id
            return

        color_ranges = [range(1, self._slot_color_count(slot) + 1) for slot in slots]
        base = int(wang_id)
        for colors in itertools.product(*color_ranges):
            variation = base
            for slot, color in zip(slots, colors):
                variation |= color << (slot * SLOT_BITS)
            yield WangId(variation)

    def find_matching_tiles(self, wang_id: "WangId | int") -> list[Tile]:
        """
        Find all tiles compatible with a possibly wildcarded WangId.

        Results are concatenated in candidate order and not deduplicated,
        so a tile reachable through several candidates appears several
        times. A random pick over the list is weighted accordingly.

        Args:
            wang_id: Query id, where 0 slots are wildcards

        Returns:
            Matching tiles, possibly empty
        """
        matches = []
        for candidate in self.iter_candidate_ids(wang_id):
            matches.extend(self._wang_id_to_tiles.get(candidate, ()))
        return matches

    def find_matching_tile(
        self, wang_id: "WangId | int", rng: random.Random | None = None
    ) -> Tile | None:
        """
        Pick one tile uniformly from find_matching_tiles.

        Picks are uniform over the list entries; no per-tile weighting applies.

        Args:
            wang_id: Query id, where 0 slots are wildcards
            rng: Random source for this pick. Defaults to the set's own.

        Returns:
            A matching tile, or None if nothing matches
        """
        matches = self.find_matching_tiles(wang_id)
        if not matches:
            return None
        return (rng if rng is not None else self._rng).choice(matches)

    # -------------------------------------------------------------------------
    # Neighbor-derived identifiers
    # -------------------------------------------------------------------------

    def _neighbor_wang_id(self, layer: TileLayer, x: int, y: int) -> WangId:
        if not layer.contains(x, y):
            return WangId(0)
        return self.wang_id_of(layer.cell_at(x, y))

    def wang_id_from_surroundings(self, layer: TileLayer, x: int, y: int) -> WangId:
        """
        Compute the WangId a tile at (x, y) must satisfy to fit its neighbors.

        Each edge comes from the orthogonal neighbor's facing edge. Each
        corner comes from the first non-zero of: the diagonal neighbor's
        opposite corner, then the two orthogonal neighbors sharing that
        corner. Missing neighbors leave their slots as wildcards.

        Args:
            layer: Any grid exposing contains(x, y) and cell_at(x, y)
            x: Column of the target cell
            y: Row of the target cell (y grows downward)

        Returns:
            The required WangId, 0 in slots nothing constrains
        """
        value = 0

        if self._corner_colors > 0:
            for corner, sources in CORNER_SOURCES.items():
                for (dx, dy), neighbor_corner in sources:
                    color = self._neighbor_wang_id(layer, x + dx, y + dy).corner_color(
                        neighbor_corner
                    )
                    if color:
                        value |= color << corner_offset(corner)
                        break

        if self._edge_colors > 0:
            for edge, ((dx, dy), neighbor_edge) in EDGE_SOURCES.items():
                color = self._neighbor_wang_id(layer, x + dx, y + dy).edge_color(
                    neighbor_edge
                )
                value |= color << edge_offset(edge)

        return WangId(value)

    # -------------------------------------------------------------------------
    # Cloning
    # -------------------------------------------------------------------------

    def clone(self, tileset: Tileset) -> "WangSet":
        """
        Copy this Wang set onto another tileset.

        Registered tiles are resolved by id in the new tileset. The copy
        shares no mutable state with this set; its random source starts
        from the same state.

        Args:
            tileset: Owner of the copy

        Returns:
            Independent WangSet with the same name, color counts and registry

        Raises:
            WangSetError: If a registered tile id does not exist in the
                target tileset. No copy is made in that case.
        """
        missing = sorted(
            tile_id for tile_id in self._tile_id_to_wang_id if tileset.tile(tile_id) is None
        )
        if missing:
            raise WangSetError(
                f"Cannot clone {self.name!r} onto tileset {tileset.name!r}: "
                f"tile id(s) {missing} missing from the target"
            )

        rng = random.Random()
        rng.setstate(self._rng.getstate())
        copy = WangSet(
            tileset,
            self._edge_colors,
            self._corner_colors,
            self.name,
            self.image_tile_id,
            rng=rng,
        )

        for wang_id, tiles in self._wang_id_to_tiles.items():
            copy._wang_id_to_tiles[wang_id] = [tileset.tile(tile.id) for tile in tiles]
        copy._tile_id_to_wang_id = dict(self._tile_id_to_wang_id)

        logger.debug(f"Cloned {self.name!r} with {len(copy)} entries")
        return copy

    def __repr__(self) -> str:
        return (
            f"WangSet({self.name!r}, edge_colors={self._edge_colors}, "
            f"corner_colors={self._corner_colors}, entries={len(self)})"
        )
