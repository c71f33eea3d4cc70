"""
Wang Tiles - Packed Wang Identifier

A WangId packs eight 4-bit color slots into one unsigned 32-bit value.
Slots alternate edge/corner going clockwise from the top edge:

    slot:    7      6      5      4      3      2      1      0
    bits:  28-31  24-27  20-23  16-19  12-15  8-11   4-7    0-3
    kind:   TL     L      BL     B      BR     R      TR     T

Edge direction d lives at bit offset 8*d, corner direction d at 8*d + 4.
A slot value of 0 is a wildcard ("no constraint").
"""

from typing import Iterable

from .constants import MAX_COLOR_COUNT, SLOT_BITS, SLOT_COUNT, SLOT_MASK, WANG_ID_MAX


def edge_offset(direction: int) -> int:
    """Bit offset of the edge slot for direction 0..3."""
    _check_direction(direction)
    return direction * 8


def corner_offset(direction: int) -> int:
    """Bit offset of the corner slot for direction 0..3."""
    _check_direction(direction)
    return direction * 8 + 4


def _check_direction(direction: int):
    if not 0 <= direction <= 3:
        raise ValueError(f"Direction must be 0-3, got {direction}")


class WangId:
    """Immutable packed identifier of four edge and four corner colors."""

    __slots__ = ("_value",)

    def __init__(self, value: "int | WangId" = 0):
        if isinstance(value, WangId):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"WangId expects an int or WangId, got {type(value).__name__}"
            )
        if not 0 <= value <= WANG_ID_MAX:
            raise ValueError(f"WangId must fit in 32 bits, got {value:#x}")
        self._value = value

    @staticmethod
    def from_colors(
        edges: Iterable[int] = (0, 0, 0, 0),
        corners: Iterable[int] = (0, 0, 0, 0),
    ) -> "WangId":
        """
        Build a WangId from edge and corner colors.

        Args:
            edges: Colors for top, right, bottom, left
            corners: Colors for top-right, bottom-right, bottom-left, top-left

        Returns:
            The packed WangId

        Raises:
            ValueError: If either sequence is not length 4 or a color
                does not fit in a 4-bit slot
        """
        edges = list(edges)
        corners = list(corners)
        if len(edges) != 4 or len(corners) != 4:
            raise ValueError(
                f"Expected 4 edges and 4 corners, got {len(edges)} and {len(corners)}"
            )

        value = 0
        for direction in range(4):
            for kind, color, offset in (
                ("edge", edges[direction], direction * 8),
                ("corner", corners[direction], direction * 8 + 4),
            ):
                if not 0 <= color <= MAX_COLOR_COUNT:
                    raise ValueError(
                        f"Invalid {kind} color {color} at direction {direction}. "
                        f"Must be 0-{MAX_COLOR_COUNT}"
                    )
                value |= color << offset
        return WangId(value)

    @property
    def value(self) -> int:
        return self._value

    def color_at(self, index: int) -> int:
        """Color in slot 0..7 (even = edge, odd = corner)."""
        if not 0 <= index < SLOT_COUNT:
            raise ValueError(f"Slot index must be 0-{SLOT_COUNT - 1}, got {index}")
        return (self._value >> (index * SLOT_BITS)) & SLOT_MASK

    def edge_color(self, direction: int) -> int:
        return (self._value >> edge_offset(direction)) & SLOT_MASK

    def corner_color(self, direction: int) -> int:
        return (self._value >> corner_offset(direction)) & SLOT_MASK

    def edges(self) -> tuple[int, int, int, int]:
        return tuple(self.edge_color(d) for d in range(4))

    def corners(self) -> tuple[int, int, int, int]:
        return tuple(self.corner_color(d) for d in range(4))

    def with_edge_color(self, direction: int, color: int) -> "WangId":
        """Return a copy with one edge slot replaced."""
        return self._with_slot(edge_offset(direction), color)

    def with_corner_color(self, direction: int, color: int) -> "WangId":
        """Return a copy with one corner slot replaced."""
        return self._with_slot(corner_offset(direction), color)

    def _with_slot(self, offset: int, color: int) -> "WangId":
        if not 0 <= color <= MAX_COLOR_COUNT:
            raise ValueError(f"Color must be 0-{MAX_COLOR_COUNT}, got {color}")
        cleared = self._value & ~(SLOT_MASK << offset) & WANG_ID_MAX
        return WangId(cleared | (color << offset))

    def wildcard_slots(self, edge_colors: int, corner_colors: int) -> list[int]:
        """
        Find wildcard slots that matching would have to expand.

        Slot kinds with a zero color count are never reported, since
        there is nothing to expand them into.

        Args:
            edge_colors: Number of edge colors in the owning Wang set
            corner_colors: Number of corner colors in the owning Wang set

        Returns:
            Slot indices (0..7), edge slots first, then corner slots
        """
        slots = []
        if edge_colors > 0:
            slots.extend(d * 2 for d in range(4) if not self.edge_color(d))
        if corner_colors > 0:
            slots.extend(d * 2 + 1 for d in range(4) if not self.corner_color(d))
        return slots

    def has_wildcards(self, edge_colors: int, corner_colors: int) -> bool:
        return bool(self.wildcard_slots(edge_colors, corner_colors))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __or__(self, other: "int | WangId") -> "WangId":
        return WangId(self._value | int(other))

    __ror__ = __or__

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other) -> bool:
        if isinstance(other, WangId):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"WangId({self._value:#010x})"
