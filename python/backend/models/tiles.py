"""Tile identities and the tile-count configuration shared by all layers."""

from __future__ import annotations

TILE_COUNT = 5
MIN_TILES = 2
# Uniqueness is verified by brute force over all N! orderings, so this
# stays small.
MAX_TILES = 7

TILE_SYMBOLS = "ABCDEFG"


def symbol(tile: int) -> str:
    """Return the display symbol for *tile* (``0 -> "A"``)."""
    return TILE_SYMBOLS[tile]


def check_tile_count(tile_count: int) -> None:
    if not MIN_TILES <= tile_count <= MAX_TILES:
        raise ValueError(
            f"Tile count must be between {MIN_TILES} and {MAX_TILES}, "
            f"got {tile_count}."
        )
