# -*- coding: utf-8 -*-
# Pipeloop/maze/config.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/14/2026

Purpose
-------
Default settings for a solve run and the helpers that merge user overrides over them.

Main Tasks
----------
    1. Provide nested `DEFAULTS` (walk / render / plot / export / logging).
    2. Deep-merge overrides without mutating inputs (`deep_merge`).
    3. Read JSON overrides from disk (`load_config`).
    4. Validate the merged result and raise `ConfigError` with actionable context.

Notes
-----
- Unknown keys pass through untouched; only listed keys are validated.
- `walk.direction_order` accepts names or initials ("N", "east", ...). After
  validation it is a tuple of `Direction`.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .errors import ConfigError
from .model.tiles import Direction

__all__ = ["DEFAULTS", "CHARSETS", "LOG_LEVELS", "deep_merge", "load_config", "validate_config"]

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    "walk": {
        "direction_order": ["N", "E", "S", "W"],
    },
    "render": {
        "charset": "unicode",       # "unicode" (box drawing) or "ascii"
        "border": True,
        "erase_non_loop": True,
        "mark_enclosed": True,
    },
    "plot": {
        "save_path": None,          # set (str) to write a PNG of the loop
        "show": False,
    },
    "export": {
        "json": None,
        "csv": None,
    },
    "logging": {
        "level": "INFO",
        "format": "%(levelname)s:%(name)s:%(message)s",
    },
}

CHARSETS = ("unicode", "ascii")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def load_config(path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build a validated config: DEFAULTS <- JSON file at `path` <- `overrides`.

    Raises
    ------
    FileNotFoundError
        If `path` is given but missing.
    ConfigError
        If the file is not a JSON object or a value is invalid.
    """
    cfg = copy.deepcopy(DEFAULTS)
    if path:
        if not os.path.exists(path):
            raise FileNotFoundError("[load_config] File not found: {}".format(path))
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError("Config file is not valid JSON.", {"path": path, "error": str(e)}) from e
        if not isinstance(data, dict):
            raise ConfigError("Config file must hold a JSON object.", {"path": path})
        cfg = deep_merge(cfg, data)
    cfg = deep_merge(cfg, overrides)
    return validate_config(cfg)


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check and normalize a merged config in place; returns it for chaining.
    """
    order = cfg.get("walk", {}).get("direction_order")
    try:
        dirs = tuple(d if isinstance(d, Direction) else Direction.from_name(d) for d in order)
    except (TypeError, ValueError) as e:
        raise ConfigError("Invalid walk.direction_order.", {"value": order, "error": str(e)}) from e
    if sorted(dirs) != sorted(Direction):
        raise ConfigError("walk.direction_order must list each of N, E, S, W once.", {"value": order})
    cfg["walk"]["direction_order"] = dirs

    charset = cfg.get("render", {}).get("charset")
    if charset not in CHARSETS:
        raise ConfigError("Unknown render.charset.", {"value": charset, "allowed": CHARSETS})

    level = str(cfg.get("logging", {}).get("level", "")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError("Unknown logging.level.", {"value": level, "allowed": LOG_LEVELS})
    cfg["logging"]["level"] = level

    logger.debug("[validate_config] %s", cfg)
    return cfg
