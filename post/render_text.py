# -*- coding: utf-8 -*-
# Pipeloop/post/render_text.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/16/2026

Purpose
-------
Human-readable text rendering of a pipe grid for terminals and logs.

Main Tasks
----------
    1) Draw tiles with box-drawing glyphs (│ ─ └ ┘ ┐ ┌) or plain puzzle ASCII.
    2) Optionally blank every tile that is not on the loop (the start stays 'S').
    3) Optionally mark enclosed cells with 'I' and frame the grid with a border.

Notes
-----
- Box-drawing output needs a UTF-8 capable terminal (codepage 65001 on Windows).
"""

from typing import List, Optional

import numpy as np

from maze.model.grid import PipeGrid
from maze.model.tiles import Tile
from maze.topology.walk import LoopResult

__all__ = ["render_grid"]

_BORDER = {
    "unicode": ("┌", "─", "┐", "│", "└", "┘"),
    "ascii": ("+", "-", "+", "|", "+", "+"),
}


def render_grid(grid: PipeGrid,
                loop: Optional[LoopResult] = None,
                enclosed: Optional[np.ndarray] = None,
                *,
                charset: str = "unicode",
                border: bool = True,
                erase_non_loop: bool = True,
                mark_enclosed: bool = True) -> str:
    """
    Render `grid` as a multi-line string.

    Parameters
    ----------
    grid : PipeGrid
    loop : LoopResult, optional
        When given and `erase_non_loop` is set, tiles off the loop are blanked.
    enclosed : np.ndarray, optional
        (H, W) boolean mask; enclosed cells are drawn as 'I' if `mark_enclosed`.
    charset : {"unicode", "ascii"}
    border : bool
        Frame the grid.

    Returns
    -------
    str
    """
    if charset not in _BORDER:
        raise ValueError("charset must be 'unicode' or 'ascii'.")
    if enclosed is not None and enclosed.shape != grid.shape:
        raise ValueError(f"enclosed mask shape {enclosed.shape} != grid shape {grid.shape}.")

    on_loop = loop.loop_mask(grid.shape) if loop is not None else None

    lines: List[str] = []
    for y, row in enumerate(grid.rows()):
        chars = []
        for x, tile in enumerate(row):
            if mark_enclosed and enclosed is not None and enclosed[y, x]:
                chars.append("I")
                continue
            if erase_non_loop and on_loop is not None and not on_loop[y, x]:
                tile = Tile.EMPTY
            chars.append(tile.glyph(charset))
        lines.append("".join(chars))

    if not border:
        return "\n".join(lines)

    tl, h, tr, v, bl, br = _BORDER[charset]
    framed = [tl + h * grid.width + tr]
    framed.extend(v + line + v for line in lines)
    framed.append(bl + h * grid.width + br)
    return "\n".join(framed)
