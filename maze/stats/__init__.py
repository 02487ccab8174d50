# -*- coding: utf-8 -*-
# Pipeloop/maze/stats/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/15/2026

Stats Subfolder:
----------------
- report:  `summarize` (answers, grid/start/loop context, area consistency flag) and
           `farthest_steps`.
- export:  JSON and key/value CSV writers for summaries.
"""

from .report import farthest_steps, summarize
from .export import write_summary_csv, write_summary_json

__all__ = ["farthest_steps", "summarize", "write_summary_csv", "write_summary_json"]
