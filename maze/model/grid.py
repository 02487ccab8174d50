# -*- coding: utf-8 -*-
# Pipeloop/maze/model/grid.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Purpose:
--------
Immutable rectangular grid of pipe tiles with coordinate helpers.

Main Tasks:
-----------
   1) Store tiles as a read-only (H, W) int8 NumPy array of `Tile` codes.
   2) Locate the single START cell (fatal if none or several).
   3) Bounds-checked lookups: `at`, `adjacent`, `is_valid_dir`.

Notes:
------
   - Positions are (x, y) = (column, row); the array is indexed [row, column].
   - Nothing mutates the grid after construction. Views derived from a loop (for
     example "non-loop tiles erased") are built as masks elsewhere.
"""

from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np

from ..errors import ParseError, StartTileError
from .tiles import Direction, Tile, next_dir

__all__ = ["PipeGrid", "find_start"]

Position = Tuple[int, int]


def find_start(tiles: np.ndarray) -> Position:
    """
    Return the (x, y) of the only START tile.

    Raises
    ------
    StartTileError
        If there is no START tile or more than one.
    """
    ys, xs = np.nonzero(tiles == int(Tile.START))
    if xs.size == 0:
        raise StartTileError("Grid has no start tile 'S'.")
    if xs.size > 1:
        found = [(int(x), int(y)) for x, y in zip(xs, ys)]
        raise StartTileError(
            "Grid has {} start tiles; expected exactly one.".format(xs.size),
            {"positions": found},
        )
    return int(xs[0]), int(ys[0])


class PipeGrid:
    """
    Rectangular, row-major grid of tiles.

    Parameters
    ----------
    tiles : Sequence[Sequence[Tile]] or np.ndarray
        Rows of tiles (or tile codes). All rows must have the same length.

    Attributes
    ----------
    tiles : np.ndarray
        Read-only (H, W) int8 array of tile codes.
    start : Tuple[int, int]
        (x, y) of the START tile.
    """

    def __init__(self, tiles):
        arr = _as_tile_array(tiles)
        arr.setflags(write=False)
        self.tiles: np.ndarray = arr
        self.start: Position = find_start(arr)

    # --------------------
    # Shape
    # --------------------
    @property
    def width(self) -> int:
        return int(self.tiles.shape[1])

    @property
    def height(self) -> int:
        return int(self.tiles.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), matching the NumPy array."""
        return self.height, self.width

    # --------------------
    # Lookups
    # --------------------
    def in_bounds(self, xy: Position) -> bool:
        return 0 <= xy[0] < self.width and 0 <= xy[1] < self.height

    def at(self, xy: Position) -> Optional[Tile]:
        """Tile at (x, y), or None if outside the grid."""
        if not self.in_bounds(xy):
            return None
        return Tile(int(self.tiles[xy[1], xy[0]]))

    def adjacent(self, xy: Position, d: Direction) -> Optional[Tile]:
        return self.at(d.offset_by(xy, 1))

    def is_valid_dir(self, xy: Position, d: Direction) -> bool:
        """True if stepping from `xy` toward `d` enters a tile that accepts travel in `d`."""
        t = self.adjacent(xy, d)
        return t is not None and next_dir(t, d) is not None

    def rows(self) -> Iterator[List[Tile]]:
        for row in self.tiles:
            yield [Tile(int(v)) for v in row]

    def __repr__(self) -> str:
        return "PipeGrid(width={}, height={}, start={})".format(self.width, self.height, self.start)


_TILE_CODES = np.array([int(t) for t in Tile])


def _as_tile_array(tiles) -> np.ndarray:
    """Validate rectangularity and convert rows of tiles to an int8 array."""
    if isinstance(tiles, np.ndarray):
        if tiles.ndim != 2 or tiles.size == 0:
            raise ParseError("Expected a non-empty 2D tile array.", {"shape": tiles.shape})
        unknown = np.setdiff1d(np.unique(tiles), _TILE_CODES)
        if unknown.size:
            raise ParseError("Unknown tile code in array.", {"codes": unknown.tolist()})
        return tiles.astype(np.int8, copy=True)

    rows: List[Sequence[Tile]] = [list(r) for r in tiles]
    if not rows or not rows[0]:
        raise ParseError("Grid is empty.")
    width = len(rows[0])
    for y, r in enumerate(rows):
        if len(r) != width:
            raise ParseError(
                "Grid is not rectangular.",
                {"row": y, "length": len(r), "expected": width},
            )
    return np.array([[int(t) for t in r] for r in rows], dtype=np.int8)
