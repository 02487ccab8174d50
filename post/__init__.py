# -*- coding: utf-8 -*-
# Pipeloop/post/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/16/2026

Modules:
--------
- render_text:  Terminal rendering of the grid with box-drawing or ASCII glyphs,
                optional border, non-loop erasure, and 'I' marks for enclosed cells.

- plot_maze:    matplotlib plot of the loop polyline, enclosed cells, and start.
                Headless-safe backend selection.
"""

__all__ = ["render_text", "plot_maze"]
