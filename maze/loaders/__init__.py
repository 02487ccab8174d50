# -*- coding: utf-8 -*-
# Pipeloop/maze/loaders/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Loaders Subpackage:
-------------------
Readers that turn puzzle input into a `PipeGrid`.

Modules:
--------
- txt_loader:  Plain-text parser (one row per line, one tile per character).

Assumptions & Notes:
--------------------
- Input must be rectangular after stripping whitespace and trailing blank lines
- Exactly one 'S' tile is required; the check lives in `PipeGrid`
"""

from .txt_loader import parse_lines, load_txt

__all__ = ["parse_lines", "load_txt"]
