# -*- coding: utf-8 -*-
# Pipeloop/maze/stats/export.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/15/2026

Purpose:
--------
Write solve summaries (nested dicts from `report.summarize`) to disk as JSON or as a
two-column "key,value" CSV with dotted key paths.

Main Tasks:
-----------
    1. Walk the summary sections into ("section.key", value) rows.
    2. Export as CSV or indented JSON, creating the parent folder if needed.
    3. Encode numpy scalars and lists as JSON strings so every cell stays scalar.
"""

from typing import Any, Dict, Iterator, Tuple
import csv
import json
import os

import numpy as np

__all__ = ["write_summary_csv", "write_summary_json"]


def _cell(value: Any) -> Any:
    """CSV cell for one summary leaf: numpy scalars unwrapped, lists as JSON text."""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (list, tuple, np.ndarray)):
        return _dumps(value)
    return value


def _json_default(o):
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _dumps(obj: Any, indent=None) -> str:
    return json.dumps(obj, default=_json_default, indent=indent, ensure_ascii=False)


def _summary_rows(summary: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """
    Yield ("section.key", cell) pairs, sections and keys in sorted order.

    A summary from `summarize` gives rows such as `answers.enclosed`,
    `loop.bbox` (a JSON list) and `start.shape`.
    """
    for key in sorted(summary):
        path = "{}.{}".format(prefix, key) if prefix else str(key)
        value = summary[key]
        if isinstance(value, dict):
            yield from _summary_rows(value, path)
        else:
            yield path, _cell(value)


def _prepare(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    os.makedirs(folder, exist_ok=True)


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write a solve summary as "key,value" rows, e.g. `answers.farthest_steps,6`.

    Returns the written path.
    """
    _prepare(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        w.writerows(_summary_rows(summary))
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """Write a solve summary with its grid/start/loop/answers/flags sections intact; returns the path."""
    _prepare(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(_dumps(summary, indent=indent))
    return path
