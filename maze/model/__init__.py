# -*- coding: utf-8 -*-
# Pipeloop/maze/model/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Model Subfolder:
----------------
Tile/direction enumerations, connectivity rules, and the immutable grid.

Modules:
--------
- tiles:  Direction and Tile enums, character/glyph mapping, `next_dir` lookup,
          `connects_up` / `connects_down` predicates.

- grid:   `PipeGrid` (read-only int8 array + start position) and `find_start`.
"""

from .tiles import (
    Direction, Tile, DIRECTION_ORDER, PIPE_TILES,
    next_dir, connects_up, connects_down,
)
from .grid import PipeGrid, find_start

__all__ = [
    "Direction", "Tile", "DIRECTION_ORDER", "PIPE_TILES",
    "next_dir", "connects_up", "connects_down",
    "PipeGrid", "find_start",
]
