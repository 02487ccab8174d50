# -*- coding: utf-8 -*-
# Pipeloop/maze/errors.py


"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Purpose
-------
Provide typed exceptions for the maze layer with compact, context-aware messages so that
parsing, loop extraction, start resolution, and configuration failures are reported the
same way everywhere.

Main Tasks
----------
    1. Define MazeError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ParseError, StartTileError, LoopError, StartShapeError,
       ConfigError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Every error here means "input does not encode a single valid pipe loop" (or the
  configuration is unusable). None of them is transient; callers abort on them.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "MazeError",
    "ParseError",
    "StartTileError",
    "LoopError",
    "StartShapeError",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class MazeError(Exception):
    """
    Base class for all malformed-input errors of the pipe maze.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"pos": (3, 4), "dir": "NORTH"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(MazeError, self).__init__(message)

    def __str__(self):
        base = super(MazeError, self).__str__()
        return base + _format_context(self.context)


class ParseError(MazeError):
    """
    Text input could not be turned into a grid:
      - unknown tile character
      - ragged (non-rectangular) rows
      - empty input
    """


class StartTileError(MazeError):
    """Zero or more than one `S` tile in the grid."""


class LoopError(MazeError):
    """
    The walk from the start cannot close a loop:
      - no neighbour accepts a step out of the start
      - the walk steps off the grid
      - the walk enters a tile that does not accept the incoming direction
    """


class StartShapeError(MazeError):
    """No single pipe shape fits the two loop directions at the start cell."""


class ConfigError(MazeError):
    """
    Invalid configuration values:
      - direction order that is not a permutation of N/E/S/W
      - unknown render charset or log level
    """
