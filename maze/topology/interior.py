# -*- coding: utf-8 -*-
# Pipeloop/maze/topology/interior.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/13/2026

Purpose:
--------
Classify grid cells as enclosed / not enclosed by the loop using scanline crossing
parity with two independent flags per row.

Why two flags:
--------------
A horizontal run of pipe lies along the scan direction, so counting every loop cell as
a crossing is wrong. Instead each loop cell reports whether it opens upward and/or
downward. Scanning left to right, the "upper" flag flips on every upward opening and
the "lower" flag on every downward opening. A non-loop cell is enclosed only when both
flags are set:

    |  flips both      -  flips neither
    L, J flip upper    7, F flip lower

so `L--7` (one crossing) flips both flags once, while `L--J` (a bump) flips the upper
flag twice and leaves the state unchanged.

Main Tasks:
-----------
   1) Bounding box of the loop; cells outside it are never enclosed.
   2) Per-cell (up, down) flags inside the box; the start uses its resolved shape.
   3) Per-row prefix parity of each flag; enclosed = not-on-loop & upper & lower.

Notes:
------
   - Rows are independent; the scan is vectorised over all rows at once with
     `cumsum(...) % 2` along the column axis.
"""

from typing import Sequence, Tuple
import numpy as np

from ..model.grid import PipeGrid
from ..model.tiles import Tile, connects_down, connects_up

__all__ = ["bounding_box", "crossing_flags", "enclosed_mask", "count_enclosed"]

Position = Tuple[int, int]


def bounding_box(path: Sequence[Position]) -> Tuple[int, int, int, int]:
    """
    Axis-aligned bounds of the loop as (x_min, y_min, x_max, y_max), inclusive.

    Raises
    ------
    ValueError
        If `path` is empty.
    """
    if not path:
        raise ValueError("Empty loop path has no bounding box.")
    pts = np.asarray(path, dtype=np.int64)
    x_min, y_min = pts.min(axis=0)
    x_max, y_max = pts.max(axis=0)
    return int(x_min), int(y_min), int(x_max), int(y_max)


def crossing_flags(grid: PipeGrid,
                   loop_path: Sequence[Position],
                   resolved_start_shape: Tile) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Per-cell flags over the loop's bounding box.

    Returns
    -------
    (on_loop, up, down) : three (h, w) boolean arrays indexed [row - y_min, col - x_min].
    """
    x0, y0, x1, y1 = bounding_box(loop_path)
    h, w = y1 - y0 + 1, x1 - x0 + 1
    on_loop = np.zeros((h, w), dtype=bool)
    up = np.zeros((h, w), dtype=bool)
    down = np.zeros((h, w), dtype=bool)

    start = loop_path[0]
    for (x, y) in loop_path:
        t = resolved_start_shape if (x, y) == start else grid.at((x, y))
        r, c = y - y0, x - x0
        on_loop[r, c] = True
        up[r, c] = connects_up(t)
        down[r, c] = connects_down(t)
    return on_loop, up, down


def enclosed_mask(grid: PipeGrid,
                  loop_path: Sequence[Position],
                  resolved_start_shape: Tile) -> np.ndarray:
    """
    Full-grid boolean mask (H, W) of cells strictly enclosed by the loop.
    """
    on_loop, up, down = crossing_flags(grid, loop_path, resolved_start_shape)

    # Flags flip on loop cells only, so an inclusive prefix sum gives the state
    # seen by each non-loop cell.
    upper_inside = (np.cumsum(up, axis=1) % 2).astype(bool)
    lower_inside = (np.cumsum(down, axis=1) % 2).astype(bool)
    inside = ~on_loop & upper_inside & lower_inside

    x0, y0, x1, y1 = bounding_box(loop_path)
    mask = np.zeros(grid.shape, dtype=bool)
    mask[y0:y1 + 1, x0:x1 + 1] = inside
    return mask


def count_enclosed(grid: PipeGrid,
                   loop_path: Sequence[Position],
                   resolved_start_shape: Tile) -> int:
    """
    Number of non-loop cells strictly inside the loop.

    Parameters
    ----------
    grid : PipeGrid
        Grid the loop was extracted from.
    loop_path : Sequence[Tuple[int, int]]
        Ordered loop cells, start first.
    resolved_start_shape : Tile
        Pipe shape standing in for the START tile.

    Returns
    -------
    int
    """
    return int(enclosed_mask(grid, loop_path, resolved_start_shape).sum())
