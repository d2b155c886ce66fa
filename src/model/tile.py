"""Contains the bitmask tile type and its mapping to box-drawing glyphs."""

from __future__ import annotations

from enum import IntFlag

from enums import Direction


class Tile(IntFlag):
    """Bitmask describing the open connections of a single grid cell.

    The four direction flags state that the cell has an open connection toward that side. The FIXED flag is orthogonal
    to them and marks the cell's connection pattern as final.
    """

    EMPTY = 0
    LEFT = 1 << 0
    RIGHT = 1 << 1
    UP = 1 << 2
    DOWN = 1 << 3
    FIXED = 1 << 4


DIRECTION_MASK: Tile = Tile.LEFT | Tile.RIGHT | Tile.UP | Tile.DOWN

# Every cell starts fully open and unfixed (maximum entropy).
INITIAL_TILE: Tile = DIRECTION_MASK

_DIRECTION_TILES: dict[Direction, Tile] = {
    Direction.LEFT: Tile.LEFT,
    Direction.RIGHT: Tile.RIGHT,
    Direction.UP: Tile.UP,
    Direction.DOWN: Tile.DOWN,
}

TILE_GLYPHS: dict[Tile, str] = {
    Tile.EMPTY: " ",
    Tile.LEFT: "╴",
    Tile.RIGHT: "╶",
    Tile.UP: "╵",
    Tile.DOWN: "╷",
    Tile.LEFT | Tile.RIGHT: "─",
    Tile.UP | Tile.DOWN: "│",
    Tile.LEFT | Tile.UP: "┘",
    Tile.LEFT | Tile.DOWN: "┐",
    Tile.RIGHT | Tile.UP: "└",
    Tile.RIGHT | Tile.DOWN: "┌",
    Tile.LEFT | Tile.RIGHT | Tile.UP: "┴",
    Tile.LEFT | Tile.RIGHT | Tile.DOWN: "┬",
    Tile.LEFT | Tile.UP | Tile.DOWN: "┤",
    Tile.RIGHT | Tile.UP | Tile.DOWN: "├",
    Tile.LEFT | Tile.RIGHT | Tile.UP | Tile.DOWN: "┼",
}


def tile_for_direction(direction: Direction) -> Tile:
    """Returns the tile flag representing an open connection toward the given direction."""
    return _DIRECTION_TILES[direction]


def get_directions(tile: Tile) -> Tile:
    """Returns the direction bits of a tile with the FIXED flag masked off."""
    return Tile(tile & DIRECTION_MASK)


def remove_flags(tile: Tile, flags: Tile) -> Tile:
    """Returns a copy of the tile with the given flags cleared."""
    return Tile(int(tile) & ~int(flags))


def count_open_sides(tile: Tile) -> int:
    """Returns the number of direction bits still set on a tile."""
    return sum(1 for direction in Direction if tile & tile_for_direction(direction))


def get_glyph(tile: Tile) -> str:
    """Returns the box-drawing glyph for a tile, ignoring its FIXED flag.

    Args:
        tile: The tile to look up.

    Returns:
        One of the 16 glyphs of the pipe alphabet.
    """
    return TILE_GLYPHS[get_directions(tile)]
