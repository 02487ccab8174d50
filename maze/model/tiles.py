# -*- coding: utf-8 -*-
# Pipeloop/maze/model/tiles.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Purpose:
--------
Closed enumerations for grid tiles and cardinal directions, plus the connectivity rules
that tell a walker where a pipe leads. This module owns *shape-level* concerns only:
   - Direction offsets and opposites,
   - Tile <-> character mapping (puzzle text and box-drawing glyphs),
   - The total lookup (tile, incoming direction) -> outgoing direction,
   - Upward/downward opening predicates used by the scanline classifier.

Conventions:
------------
   - Positions are (x, y) = (column, row); row grows downward, so NORTH is dy = -1.
   - "Incoming direction" is the direction of travel when entering the cell, not the
     side it was entered from. A bend L (north-east) entered while travelling SOUTH
     leaves travelling EAST.

Notes:
------
   - No logging, no numpy, no I/O. Pure lookups.
"""

from enum import IntEnum
from typing import Dict, Optional, Tuple

__all__ = [
    "Direction",
    "Tile",
    "DIRECTION_ORDER",
    "PIPE_TILES",
    "next_dir",
    "connects_up",
    "connects_down",
]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit step (dx, dy) for this direction."""
        return _OFFSETS[self]

    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    def offset_by(self, xy: Tuple[int, int], by: int = 1) -> Tuple[int, int]:
        """Return `xy` moved `by` cells in this direction."""
        dx, dy = _OFFSETS[self]
        return xy[0] + dx * by, xy[1] + dy * by

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Accept 'N', 'north', 'NORTH', ... (case-insensitive)."""
        key = str(name).strip().upper()
        for d in cls:
            if d.name == key or d.name[0] == key:
                return d
        raise ValueError("Unknown direction '{}'.".format(name))


_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

# Default tie-break when two neighbours of the start are valid.
DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST,
)


class Tile(IntEnum):
    EMPTY = 0
    START = 1
    VERTICAL = 2
    HORIZONTAL = 3
    BEND_NE = 4
    BEND_NW = 5
    BEND_SW = 6
    BEND_SE = 7

    @classmethod
    def from_char(cls, ch: str) -> "Tile":
        """Map a puzzle character to a tile. Raises KeyError for unknown characters."""
        return _CHAR_TO_TILE[ch]

    @property
    def char(self) -> str:
        return _TILE_TO_CHAR[self]

    def glyph(self, charset: str = "unicode") -> str:
        """Printable glyph; 'unicode' uses box-drawing characters, 'ascii' the puzzle text."""
        if charset == "ascii":
            return _TILE_TO_CHAR[self]
        return _TILE_TO_GLYPH[self]

    @property
    def is_pipe(self) -> bool:
        return self not in (Tile.EMPTY, Tile.START)


_CHAR_TO_TILE: Dict[str, Tile] = {
    ".": Tile.EMPTY,
    "S": Tile.START,
    "|": Tile.VERTICAL,
    "-": Tile.HORIZONTAL,
    "L": Tile.BEND_NE,
    "J": Tile.BEND_NW,
    "7": Tile.BEND_SW,
    "F": Tile.BEND_SE,
}
_TILE_TO_CHAR: Dict[Tile, str] = {t: c for c, t in _CHAR_TO_TILE.items()}

_TILE_TO_GLYPH: Dict[Tile, str] = {
    Tile.EMPTY: " ",
    Tile.START: "S",
    Tile.VERTICAL: "│",
    Tile.HORIZONTAL: "─",
    Tile.BEND_NE: "└",
    Tile.BEND_NW: "┘",
    Tile.BEND_SW: "┐",
    Tile.BEND_SE: "┌",
}

PIPE_TILES: Tuple[Tile, ...] = (
    Tile.VERTICAL, Tile.HORIZONTAL,
    Tile.BEND_NE, Tile.BEND_NW,
    Tile.BEND_SW, Tile.BEND_SE,
)


# -----------------------
# Connectivity rules
# -----------------------
# (tile, incoming direction) -> outgoing direction. Missing keys mean "no connection".
_N, _E, _S, _W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

_NEXT: Dict[Tuple[Tile, Direction], Direction] = {
    (Tile.VERTICAL, _N): _N,
    (Tile.VERTICAL, _S): _S,
    (Tile.HORIZONTAL, _E): _E,
    (Tile.HORIZONTAL, _W): _W,
    (Tile.BEND_NE, _S): _E,
    (Tile.BEND_NE, _W): _N,
    (Tile.BEND_NW, _S): _W,
    (Tile.BEND_NW, _E): _N,
    (Tile.BEND_SW, _N): _W,
    (Tile.BEND_SW, _E): _S,
    (Tile.BEND_SE, _N): _E,
    (Tile.BEND_SE, _W): _S,
}


def next_dir(tile: Tile, indir: Direction) -> Optional[Direction]:
    """
    Outgoing direction after entering `tile` while travelling `indir`.

    Parameters
    ----------
    tile : Tile
        Tile being entered. EMPTY and START never accept a direction.
    indir : Direction
        Direction of travel on entry.

    Returns
    -------
    Optional[Direction]
        The direction the path continues in, or None if the tile has no opening
        on the side it is entered from.
    """
    return _NEXT.get((tile, indir))


def connects_up(tile: Tile) -> bool:
    """True if the shape has an opening to the north."""
    return next_dir(tile, Direction.SOUTH) is not None


def connects_down(tile: Tile) -> bool:
    """True if the shape has an opening to the south."""
    return next_dir(tile, Direction.NORTH) is not None
