# -*- coding: utf-8 -*-
# Pipeloop/maze/__init__.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026 (Updated: 10/15/2026)

Modules:
--------
- model:     Tile and Direction enums, connectivity rules (`next_dir`), and the
             immutable `PipeGrid`.

- loaders:   Plain-text reader producing a `PipeGrid`.

- topology:  Loop-level operations:
               * loop extraction and start-shape resolution,
               * two-flag scanline classification of enclosed cells,
               * shoelace area / orientation / Pick's-theorem cross-check.

- stats:     Solve summary and JSON/CSV export.

- config:    Nested defaults, deep merge, JSON overrides, validation.

- errors:    Typed exceptions (ParseError, StartTileError, LoopError, StartShapeError,
             ConfigError) sharing a `MazeError` base.

- api:       Minimal public facade for main scripts.
               * load_grid(filename) → PipeGrid
               * solve(grid, config=None) → Solution (loop, enclosed mask, summary)

            Usage:
                from maze.api import load_grid, solve
"""

__all__ = ["model", "loaders", "topology", "stats", "config", "errors", "api"]
