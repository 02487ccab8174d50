# -*- coding: utf-8 -*-
# Pipeloop/maze/stats/report.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/15/2026

Purpose:
--------
Compact summary of a solved maze as a plain dictionary, ready for export (CSV/JSON) or
logging.

Main Tasks:
-----------
    1) Answers: loop length, steps to the farthest loop cell, enclosed-cell count.
    2) Context: grid size, start position and resolved shape, loop bounding box,
       orientation.
    3) Consistency: compare the scanline count with the Pick's-theorem count and set
       `flags.area_check`.
"""

import logging
from typing import Any, Dict, Optional

from ..model.grid import PipeGrid
from ..topology.area import enclosed_by_area, orientation
from ..topology.interior import bounding_box, count_enclosed
from ..topology.walk import LoopResult

__all__ = ["farthest_steps", "summarize"]

logger = logging.getLogger(__name__)


def farthest_steps(loop: LoopResult) -> int:
    """Steps from the start to the farthest loop cell (either way round)."""
    return len(loop) // 2


def summarize(grid: PipeGrid,
              loop: LoopResult,
              enclosed: Optional[int] = None) -> Dict[str, Any]:
    """
    Build the solve summary.

    Parameters
    ----------
    grid : PipeGrid
    loop : LoopResult
        Result of `extract_loop(grid)`.
    enclosed : int, optional
        Precomputed enclosed count; computed here if omitted.

    Returns
    -------
    dict
        {
          "grid": {"width": int, "height": int},
          "start": {"x": int, "y": int, "shape": str},
          "loop": {"length": int, "bbox": [x0, y0, x1, y1], "orientation": "CW"|"CCW"},
          "answers": {"farthest_steps": int, "enclosed": int},
          "flags": {"area_check": bool, "enclosed_by_area": int},
        }
    """
    if enclosed is None:
        enclosed = count_enclosed(grid, loop.path, loop.start_shape)
    by_area = enclosed_by_area(loop.path)
    ok = by_area == enclosed
    if not ok:
        logger.warning(
            "[summarize] Scanline count %d differs from area count %d.", enclosed, by_area
        )

    sx, sy = loop.start
    return {
        "grid": {"width": grid.width, "height": grid.height},
        "start": {"x": sx, "y": sy, "shape": loop.start_shape.char},
        "loop": {
            "length": len(loop),
            "bbox": list(bounding_box(loop.path)),
            "orientation": orientation(loop.path),
        },
        "answers": {"farthest_steps": farthest_steps(loop), "enclosed": int(enclosed)},
        "flags": {"area_check": ok, "enclosed_by_area": by_area},
    }
