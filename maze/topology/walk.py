# -*- coding: utf-8 -*-
# Pipeloop/maze/topology/walk.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/13/2026

Purpose:
--------
Extract the closed pipe loop through the START cell and resolve the shape the START
cell must have for the loop to be consistent.

Pipeline:
---------
start (from grid) → initial direction (first valid in `direction_order`) → walk until
back on start → resolve start shape from (first step, last step) → LoopResult

Conventions:
------------
   - `path[0]` is the start; the walk's successor of `path[-1]` is `path[0]`.
   - `start_dir` is the direction of the first step out of the start.
   - `end_dir` is the direction of the last step back into the start.

Notes:
------
   - The walk is an explicit loop over (position, direction). Every pipe has exactly
     two openings, so the walk is reversible and cannot cycle without the start.
   - Any permutation of the four directions as `direction_order` yields the same
     cycle, possibly traversed in the opposite sense.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence, Tuple
import numpy as np

from ..errors import LoopError, StartShapeError
from ..model.grid import PipeGrid
from ..model.tiles import DIRECTION_ORDER, PIPE_TILES, Direction, Tile, next_dir

__all__ = ["LoopResult", "extract_loop", "initial_direction", "resolve_start_shape"]

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(frozen=True)
class LoopResult:
    path: Tuple[Position, ...]
    start_shape: Tile
    start_dir: Direction
    end_dir: Direction

    def __len__(self) -> int:
        return len(self.path)

    @property
    def start(self) -> Position:
        return self.path[0]

    @property
    def positions(self) -> FrozenSet[Position]:
        """Loop cells as a set; everything else in the grid is treated as empty."""
        return frozenset(self.path)

    def tile_at(self, grid: PipeGrid, xy: Position) -> Tile:
        """Tile at `xy` with the start replaced by its resolved shape."""
        if xy == self.start:
            return self.start_shape
        return grid.at(xy)

    def loop_mask(self, shape: Tuple[int, int]) -> np.ndarray:
        """Boolean (H, W) mask, True on loop cells."""
        mask = np.zeros(shape, dtype=bool)
        xs, ys = zip(*self.path)
        mask[list(ys), list(xs)] = True
        return mask


def initial_direction(grid: PipeGrid,
                      start: Position,
                      order: Sequence[Direction] = DIRECTION_ORDER) -> Direction:
    """
    First direction in `order` whose neighbour accepts a step out of `start`.

    Raises
    ------
    LoopError
        If no neighbour connects back to the start.
    """
    for d in order:
        if grid.is_valid_dir(start, d):
            return d
    raise LoopError("No pipe connects to the start tile.", {"start": start})


def resolve_start_shape(start_dir: Direction, end_dir: Direction) -> Tile:
    """
    The unique pipe shape open toward `start_dir` and toward the side the walk
    re-entered from (travelling `end_dir`).

    Raises
    ------
    StartShapeError
        If no pipe shape (or more than one) satisfies both openings.
    """
    fits = [
        t for t in PIPE_TILES
        if next_dir(t, start_dir.opposite()) is not None and next_dir(t, end_dir) is not None
    ]
    if len(fits) != 1:
        raise StartShapeError(
            "Cannot resolve the start tile shape.",
            {"start_dir": start_dir.name, "end_dir": end_dir.name, "candidates": len(fits)},
        )
    return fits[0]


def extract_loop(grid: PipeGrid,
                 direction_order: Optional[Sequence[Direction]] = None) -> LoopResult:
    """
    Walk the loop that starts and ends at the START cell.

    Parameters
    ----------
    grid : PipeGrid
        Grid with exactly one START tile.
    direction_order : Sequence[Direction], optional
        Tie-break order for the first step (default N, E, S, W).

    Returns
    -------
    LoopResult
        Ordered loop cells (start first) and the resolved start shape.

    Raises
    ------
    LoopError
        No valid first step, the walk leaves the grid, or it enters a tile that does
        not accept the incoming direction.
    StartShapeError
        The two loop directions at the start do not define one pipe shape.
    """
    order = tuple(direction_order) if direction_order is not None else DIRECTION_ORDER
    start = grid.start
    start_dir = initial_direction(grid, start, order)

    path = [start]
    pos = start
    d = start_dir
    while True:
        pos = d.offset_by(pos, 1)
        tile = grid.at(pos)
        if tile is None:
            raise LoopError("Walk left the grid before returning to start.",
                            {"pos": pos, "dir": d.name, "steps": len(path)})
        if tile is Tile.START:
            break
        nd = next_dir(tile, d)
        if nd is None:
            raise LoopError("Walk reached a tile that does not connect.",
                            {"pos": pos, "tile": tile.char, "dir": d.name})
        path.append(pos)
        d = nd

    end_dir = d
    shape = resolve_start_shape(start_dir, end_dir)
    logger.debug(
        "[extract_loop] start=%s first=%s last=%s length=%d shape=%s",
        start, start_dir.name, end_dir.name, len(path), shape.char,
    )
    return LoopResult(path=tuple(path), start_shape=shape, start_dir=start_dir, end_dir=end_dir)
