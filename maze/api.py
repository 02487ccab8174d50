# -*- coding: utf-8 -*-
# Pipeloop/maze/api.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/15/2026

Purpose
-------
Thin façade for maze workflows. Exposes two high-level helpers to (1) load a grid from
a text file and (2) run the full solve (loop extraction, enclosed classification,
summary) in one call.

Main Tasks
----------
    1. `load_grid` → parse the file into a `PipeGrid`.
    2. `solve` → extract the loop, classify enclosed cells, build the summary.

Notes
-----
- Detailed behavior lives in `topology.walk`, `topology.interior`, and `stats.report`.
- All failures are `MazeError` subclasses (or FileNotFoundError) and are fatal.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from .config import load_config
from .loaders.txt_loader import load_txt
from .model.grid import PipeGrid
from .stats.report import summarize
from .topology.interior import enclosed_mask
from .topology.walk import LoopResult, extract_loop

__all__ = ["Solution", "load_grid", "solve"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    grid: PipeGrid
    loop: LoopResult
    enclosed: np.ndarray
    summary: Dict[str, Any]

    @property
    def farthest_steps(self) -> int:
        return self.summary["answers"]["farthest_steps"]

    @property
    def enclosed_count(self) -> int:
        return self.summary["answers"]["enclosed"]


def load_grid(filename: str) -> PipeGrid:
    """
    Load a pipe maze from a text file.

    Raises
    ------
    FileNotFoundError, ParseError, StartTileError (see `load_txt`)
    """
    grid = load_txt(filename)
    logger.info(
        "[load_grid] Loaded '%s' (%dx%d), start at %s.",
        filename, grid.width, grid.height, grid.start,
    )
    return grid


def solve(grid: PipeGrid, config: Optional[Dict[str, Any]] = None) -> Solution:
    """
    Run loop extraction and enclosed-cell classification on `grid`.

    Parameters
    ----------
    grid : PipeGrid
    config : dict, optional
        Overrides merged over `config.DEFAULTS` (only `walk.direction_order` is used).

    Returns
    -------
    Solution
        Loop, full-grid enclosed mask, and summary dict.

    Raises
    ------
    LoopError, StartShapeError, ConfigError
    """
    cfg = load_config(overrides=config)
    loop = extract_loop(grid, direction_order=cfg["walk"]["direction_order"])
    mask = enclosed_mask(grid, loop.path, loop.start_shape)
    summary = summarize(grid, loop, enclosed=int(mask.sum()))
    logger.info(
        "[solve] Loop length %d, farthest %d, enclosed %d.",
        len(loop), summary["answers"]["farthest_steps"], summary["answers"]["enclosed"],
    )
    return Solution(grid=grid, loop=loop, enclosed=mask, summary=summary)
