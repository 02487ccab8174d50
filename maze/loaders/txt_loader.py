# -*- coding: utf-8 -*-
# Pipeloop/maze/loaders/txt_loader.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/12/2026

Purpose:
--------
Read a pipe maze from a plain-text file and return it as a `PipeGrid`. One grid row per
line, one tile per character:

    .  empty        S  start        |  vertical     -  horizontal
    L  north-east   J  north-west   7  south-west   F  south-east

Main Features:
--------------
   1) Tolerates trailing whitespace, Windows line endings, and trailing blank lines.
   2) Rejects unknown characters and ragged rows with a `ParseError` that names the
      offending row/column.

Notes:
------
   - This module does *no* loop analysis; it only parses.
"""

import os
from typing import Iterable, List

from ..errors import ParseError
from ..model.grid import PipeGrid
from ..model.tiles import Tile

__all__ = ["parse_lines", "load_txt"]


def parse_lines(lines: Iterable[str]) -> PipeGrid:
    """
    Build a grid from text lines.

    Parameters
    ----------
    lines : Iterable[str]
        Grid rows. Surrounding whitespace is stripped; blank lines at the start
        or end are dropped. A blank line in the middle is a ragged row.

    Returns
    -------
    PipeGrid

    Raises
    ------
    ParseError
        Empty input, unknown character, or rows of unequal length.
    StartTileError
        Zero or several 'S' tiles.
    """
    cleaned = [line.strip() for line in lines]
    while cleaned and not cleaned[-1]:
        cleaned.pop()
    while cleaned and not cleaned[0]:
        cleaned.pop(0)
    if not cleaned:
        raise ParseError("No grid rows found.")

    rows: List[List[Tile]] = []
    for y, line in enumerate(cleaned):
        row: List[Tile] = []
        for x, ch in enumerate(line):
            try:
                row.append(Tile.from_char(ch))
            except KeyError:
                raise ParseError("Unknown tile character {!r}.".format(ch), {"row": y, "col": x}) from None
        rows.append(row)
    return PipeGrid(rows)


def load_txt(filename: str) -> PipeGrid:
    """
    Load a grid from `filename`.

    Raises
    ------
    FileNotFoundError
        If `filename` is not an existing regular file.
    ParseError
        If the bytes are not UTF-8 text; otherwise see `parse_lines`.
    StartTileError
        See `parse_lines`.
    """
    if not os.path.isfile(filename):
        raise FileNotFoundError("[load_txt] File not found: {}".format(filename))
    try:
        with open(filename, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError:
        raise ParseError("Input is not valid UTF-8 text.", {"path": filename}) from None
    return parse_lines(text.splitlines())
