"""
Wang Tiles - Wang Fill Algorithm

Fills a region of a tile layer with tiles from a Wang set so that each
placed tile matches the tiles already around it.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable

from wang.core.constants import MAX_WILDCARD_COMBINATIONS
from wang.core.tile_layer import TileLayer
from wang.core.wang_set import WangSet

logger = logging.getLogger(__name__)


@dataclass
class FillResult:
    """Result of a Wang fill."""

    stamp: TileLayer  # Placed tiles only; everything else is empty
    placed: list[tuple[int, int]] = field(default_factory=list)  # (x, y) in fill order
    unmatched: list[tuple[int, int]] = field(default_factory=list)  # (x, y) left empty

    @property
    def count(self) -> int:
        return len(self.placed)


class WangFiller:
    """
    Fills regions cell by cell using a Wang set.

    Algorithm:
        1. Treat every region cell as empty; cells outside the region
           keep their background tiles and act as fixed neighbors
        2. Visit region cells row by row, left to right
        3. Derive each cell's WangId from its current neighbors and pick
           a matching tile
        4. Commit the pick so later cells see it as a neighbor
    """

    def __init__(
        self,
        wang_set: WangSet | None = None,
        max_combinations: int = MAX_WILDCARD_COMBINATIONS,
    ):
        self.wang_set = wang_set
        self.max_combinations = max_combinations

    def fill_region(
        self,
        background: TileLayer,
        region: Iterable[tuple[int, int]],
        rng: random.Random | None = None,
    ) -> FillResult:
        """
        Fill a region of the background layer.

        Args:
            background: Layer providing the fixed neighbors around the region
            region: (x, y) positions to fill. Positions outside the
                background are ignored.
            rng: Random source for tile picks. Defaults to the Wang set's own.

        Returns:
            FillResult whose stamp has the background's size and holds only
            the placed tiles
        """
        stamp = TileLayer(background.width, background.height)
        result = FillResult(stamp=stamp)

        if self.wang_set is None:
            return result

        positions = sorted(
            {(x, y) for x, y in region if background.contains(x, y)},
            key=lambda pos: (pos[1], pos[0]),
        )
        if not positions:
            return result

        working = background.copy()
        for x, y in positions:
            working.clear_cell(x, y)

        for x, y in positions:
            wang_id = self.wang_set.wang_id_from_surroundings(working, x, y)

            combinations = self.wang_set.candidate_count(wang_id)
            if combinations > self.max_combinations:
                logger.warning(
                    f"Skipping ({x}, {y}): {wang_id!r} expands to {combinations} "
                    f"candidates (limit {self.max_combinations})"
                )
                result.unmatched.append((x, y))
                continue

            tile = self.wang_set.find_matching_tile(wang_id, rng)
            if tile is None:
                logger.debug(f"No tile matches {wang_id!r} at ({x}, {y})")
                result.unmatched.append((x, y))
                continue

            working.set_cell(x, y, tile)
            stamp.set_cell(x, y, tile)
            result.placed.append((x, y))

        logger.debug(
            f"Wang fill with {self.wang_set.name!r}: {result.count} placed, "
            f"{len(result.unmatched)} unmatched"
        )
        return result
