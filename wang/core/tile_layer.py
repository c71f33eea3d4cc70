"""
Wang Tiles - Tile Layer

A fixed-size 2D grid of tile references. Coordinates are (x, y) with y
growing downward; empty cells hold None.
"""

from typing import Iterator

from .tileset import Tile


class TileLayer:
    """Grid of cells probed by the matching engine and written by fills."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Layer size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[list[Tile | None]] = [
            [None] * width for _ in range(height)
        ]

    @staticmethod
    def from_rows(rows: list[list[Tile | None]]) -> "TileLayer":
        """
        Build a layer from rows of cells.

        Args:
            rows: List of rows (top to bottom), each a list of tiles or None

        Returns:
            New TileLayer sized to the rows

        Raises:
            ValueError: If rows have different lengths
        """
        height = len(rows)
        width = len(rows[0]) if height > 0 else 0
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {row_idx} has {len(row)} columns, expected {width}"
                )

        layer = TileLayer(width, height)
        layer._cells = [list(row) for row in rows]
        return layer

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Tile | None:
        """Tile at (x, y), or None if the cell is empty or out of bounds."""
        if not self.contains(x, y):
            return None
        return self._cells[y][x]

    def set_cell(self, x: int, y: int, tile: Tile | None):
        if not self.contains(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.width}x{self.height} layer"
            )
        self._cells[y][x] = tile

    def clear_cell(self, x: int, y: int):
        self.set_cell(x, y, None)

    def is_empty(self) -> bool:
        return all(tile is None for row in self._cells for tile in row)

    def cells(self) -> Iterator[tuple[int, int, Tile]]:
        """Iterate (x, y, tile) over occupied cells in row-major order."""
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                if tile is not None:
                    yield x, y, tile

    def copy(self) -> "TileLayer":
        """Shallow copy: new grid, same tile references."""
        return TileLayer.from_rows(self._cells) if self.height else TileLayer(self.width, 0)

    def __repr__(self) -> str:
        return f"TileLayer({self.width}x{self.height})"
