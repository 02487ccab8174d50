# -*- coding: utf-8 -*-
# Pipeloop/maze/topology/area.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/14/2026

Purpose:
--------
Polygon-level view of the loop: the ordered loop cells are treated as the vertices of
a closed rectilinear polygon through cell centres.
   - Shoelace signed area and orientation (CW/CCW),
   - Enclosed lattice-cell count via Pick's theorem: I = A - B/2 + 1.

Notes:
------
   - Pure NumPy; no logging, plotting, or file I/O.
   - The path is implicitly closed (last -> first); it must not repeat the start.
   - Screen rows grow downward, so y is negated before the area is taken; a positive
     area then means counter-clockwise as seen on screen.
   - `enclosed_by_area` is independent of the scanline classifier and is used as a
     consistency check for it.
"""

from typing import Sequence, Tuple
import numpy as np

__all__ = ["signed_area", "orientation", "enclosed_by_area"]

Position = Tuple[int, int]


def _as_xy(path: Sequence[Position]) -> np.ndarray:
    pts = np.asarray(path, dtype=np.int64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) positions, got shape {pts.shape}.")
    if pts.shape[0] < 3:
        raise ValueError("Need at least 3 positions to compute area.")
    return pts


def signed_area(path: Sequence[Position]) -> float:
    """
    Shoelace signed area of the loop polygon (y axis pointing up).

    Returns
    -------
    float
        Positive for CCW on screen, negative for CW.
    """
    pts = _as_xy(path)
    x = pts[:, 0]
    y = -pts[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(path: Sequence[Position]) -> str:
    """Return "CCW" if the loop turns counter-clockwise on screen, else "CW"."""
    return "CCW" if signed_area(path) > 0.0 else "CW"


def enclosed_by_area(path: Sequence[Position]) -> int:
    """
    Interior lattice points of the loop polygon (Pick's theorem).

    Every loop cell is a boundary lattice point, so B = len(path).
    """
    a = abs(signed_area(path))
    b = len(path)
    return int(round(a - b / 2.0 + 1.0))
