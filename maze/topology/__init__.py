# -*- coding: utf-8 -*-
# Pipeloop/maze/topology/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/13/2026 (Updated: 10/14/2026)

Topology Subfolder:
-------------------
Loop-level operations on a pipe grid: walking the loop, classifying enclosed cells, and
polygon measures of the loop.

Modules:
--------
- walk:      Start-direction tie-break, explicit walk back to the start, start-shape
             resolution, and the `LoopResult` record.

- interior:  Bounding box, per-cell up/down crossing flags, two-flag scanline parity,
             enclosed-cell mask and count.

- area:      Shoelace signed area, orientation (CW/CCW), and Pick's-theorem interior
             count used to cross-check the scanline classifier.
"""

from .walk import LoopResult, extract_loop, initial_direction, resolve_start_shape
from .interior import bounding_box, crossing_flags, enclosed_mask, count_enclosed
from .area import signed_area, orientation, enclosed_by_area

__all__ = [
    "LoopResult", "extract_loop", "initial_direction", "resolve_start_shape",
    "bounding_box", "crossing_flags", "enclosed_mask", "count_enclosed",
    "signed_area", "orientation", "enclosed_by_area",
]
