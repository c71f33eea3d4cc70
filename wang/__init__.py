"""
Wang Tiles

Wang-tile matching engine: packed edge/corner identifiers, tile
registries keyed by them, and neighbor-aware identifier derivation.
"""
