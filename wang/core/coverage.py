"""
Wang Tiles - Coverage Analysis

Reports how completely a Wang set covers its identifier space, so an
author can see which color combinations still lack a tile.
"""

import itertools
from typing import Iterator

import numpy as np

from .wang_id import WangId
from .wang_set import WangSet


def variant_counts(wang_set: WangSet) -> np.ndarray:
    """Number of tiles registered under each WangId, in registration order."""
    return np.array(
        [len(wang_set.tiles_for(wang_id)) for wang_id in wang_set.wang_ids()],
        dtype=np.int64,
    )


def total_combinations(wang_set: WangSet) -> int:
    """
    Count the complete (wildcard-free) WangIds a set can express.

    Only slot kinds with a positive color count take part, so an
    edge-only set with 2 colors has 2**4 = 16 combinations.
    """
    if wang_set.edge_colors == 0 and wang_set.corner_colors == 0:
        return 0
    total = 1
    if wang_set.edge_colors > 0:
        total *= wang_set.edge_colors**4
    if wang_set.corner_colors > 0:
        total *= wang_set.corner_colors**4
    return total


def iter_missing_wang_ids(wang_set: WangSet) -> Iterator[WangId]:
    """
    Yield complete WangIds with no registered tile.

    Enumeration is lazy; large color counts make the full space big.
    """
    if total_combinations(wang_set) == 0:
        return

    edge_range = range(1, wang_set.edge_colors + 1) if wang_set.edge_colors else (0,)
    corner_range = (
        range(1, wang_set.corner_colors + 1) if wang_set.corner_colors else (0,)
    )

    for edges in itertools.product(edge_range, repeat=4):
        for corners in itertools.product(corner_range, repeat=4):
            wang_id = WangId.from_colors(edges, corners)
            if not wang_set.tiles_for(wang_id):
                yield wang_id


def coverage_summary(wang_set: WangSet) -> dict:
    """
    Summarize identifier coverage and variant counts.

    Registered ids that still contain wildcard slots do not count
    toward coverage, since they never match a complete query.

    Args:
        wang_set: Wang set to analyze

    Returns:
        Dict with total, registered, missing, coverage (0.0-1.0) and
        variants (min/mean/max tiles per registered id)
    """
    total = total_combinations(wang_set)
    registered = sum(
        1
        for wang_id in wang_set.wang_ids()
        if not wang_id.has_wildcards(wang_set.edge_colors, wang_set.corner_colors)
    )

    counts = variant_counts(wang_set)
    if counts.size:
        variants = {
            "min": int(np.min(counts)),
            "mean": float(np.mean(counts)),
            "max": int(np.max(counts)),
        }
    else:
        variants = {"min": 0, "mean": 0.0, "max": 0}

    return {
        "total": total,
        "registered": registered,
        "missing": total - registered,
        "coverage": registered / total if total else 0.0,
        "variants": variants,
    }
