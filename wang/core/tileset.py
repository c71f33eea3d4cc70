"""
Wang Tiles - Tiles and Tilesets

Minimal tile ownership model. Only tile identity and the owning tileset
matter to the matching engine.
"""


class Tile:
    """A single tile, identified by its id within its owning tileset."""

    def __init__(self, tile_id: int, tileset: "Tileset"):
        self.id = tile_id
        self.tileset = tileset

    def __repr__(self) -> str:
        return f"Tile({self.id}, tileset={self.tileset.name!r})"


class Tileset:
    """Owns tiles by id. Tile ids are allocated sequentially from 0."""

    def __init__(self, name: str = ""):
        self.name = name
        self._tiles: dict[int, Tile] = {}
        self._next_tile_id = 0

    def add_tile(self) -> Tile:
        """Create a new tile with the next free id."""
        tile = Tile(self._next_tile_id, self)
        self._tiles[tile.id] = tile
        self._next_tile_id += 1
        return tile

    def create_tiles(self, count: int) -> list[Tile]:
        """Create `count` tiles and return them in id order."""
        return [self.add_tile() for _ in range(count)]

    def tile(self, tile_id: int) -> Tile | None:
        return self._tiles.get(tile_id)

    def tiles(self) -> list[Tile]:
        return list(self._tiles.values())

    def clone(self, name: str | None = None) -> "Tileset":
        """
        Create an independent tileset with tiles of the same ids.

        Args:
            name: Name for the copy. Defaults to this tileset's name.

        Returns:
            New Tileset whose tiles mirror this one's ids
        """
        copy = Tileset(self.name if name is None else name)
        for tile_id in self._tiles:
            copy._tiles[tile_id] = Tile(tile_id, copy)
        copy._next_tile_id = self._next_tile_id
        return copy

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, tile: Tile) -> bool:
        return tile.tileset is self and self._tiles.get(tile.id) is tile

    def __repr__(self) -> str:
        return f"Tileset({self.name!r}, tiles={len(self._tiles)})"
