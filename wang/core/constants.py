"""
Wang Tiles - Engine Constants

Bit layout of packed Wang identifiers, direction naming, and the neighbor
source tables used when deriving an identifier from surrounding cells.
"""

# Packed identifier layout
SLOT_COUNT = 8
SLOT_BITS = 4
SLOT_MASK = 0xF
WANG_ID_MAX = 0xFFFFFFFF

# A 4-bit slot can hold colors 1..15 (0 is the wildcard)
MAX_COLOR_COUNT = 15

# Edge directions (slot index = 2 * direction)
EDGE_TOP = 0
EDGE_RIGHT = 1
EDGE_BOTTOM = 2
EDGE_LEFT = 3

# Corner directions (slot index = 2 * direction + 1)
CORNER_TOP_RIGHT = 0
CORNER_BOTTOM_RIGHT = 1
CORNER_BOTTOM_LEFT = 2
CORNER_TOP_LEFT = 3

# Edge sources: result edge -> (neighbor offset (dx, dy), neighbor edge)
# The neighbor contributes the edge that faces back toward the cell.
EDGE_SOURCES = {
    EDGE_TOP: ((0, -1), EDGE_BOTTOM),
    EDGE_RIGHT: ((1, 0), EDGE_LEFT),
    EDGE_BOTTOM: ((0, 1), EDGE_TOP),
    EDGE_LEFT: ((-1, 0), EDGE_RIGHT),
}

# Corner sources in priority order: diagonal neighbor first, then the two
# orthogonal neighbors sharing that corner. First non-zero value wins.
CORNER_SOURCES = {
    CORNER_TOP_RIGHT: (
        ((1, -1), CORNER_BOTTOM_LEFT),
        ((0, -1), CORNER_BOTTOM_RIGHT),
        ((1, 0), CORNER_TOP_LEFT),
    ),
    CORNER_BOTTOM_RIGHT: (
        ((1, 1), CORNER_TOP_LEFT),
        ((1, 0), CORNER_BOTTOM_LEFT),
        ((0, 1), CORNER_TOP_RIGHT),
    ),
    CORNER_BOTTOM_LEFT: (
        ((-1, 1), CORNER_TOP_RIGHT),
        ((0, 1), CORNER_TOP_LEFT),
        ((-1, 0), CORNER_BOTTOM_RIGHT),
    ),
    CORNER_TOP_LEFT: (
        ((-1, -1), CORNER_BOTTOM_RIGHT),
        ((-1, 0), CORNER_TOP_RIGHT),
        ((0, -1), CORNER_BOTTOM_LEFT),
    ),
}

# Fill limits
MAX_WILDCARD_COMBINATIONS = 65536  # Candidate ids per cell before the filler gives up
