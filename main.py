# -*- coding: utf-8 -*-
# Pipeloop/main.py

"""
End-to-end driver:
  1) Resolve configuration (defaults <- JSON file <- CLI flags)
  2) Load the pipe grid from a text file
  3) Extract the loop through 'S' and classify enclosed cells
  4) Print both answers (+ optional text rendering)
  5) Optional plot and summary export (JSON/CSV)
"""

import argparse
import logging
import sys
import time

from maze.api import load_grid, solve
from maze.config import load_config
from maze.errors import MazeError
from maze.stats.export import write_summary_csv, write_summary_json


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pipeloop",
        description="Find the pipe loop through 'S' and count the cells it encloses.",
    )
    p.add_argument("input", help="Path to the puzzle text file.")
    p.add_argument("--config", default=None, help="JSON file with config overrides.")
    p.add_argument("--render", action="store_true", help="Print the grid with the loop and enclosed cells.")
    p.add_argument("--ascii", action="store_true", help="Render with puzzle characters instead of box drawing.")
    p.add_argument("--plot", default=None, metavar="PATH", help="Save a PNG plot of the loop.")
    p.add_argument("--json", default=None, metavar="PATH", help="Write the summary as JSON.")
    p.add_argument("--csv", default=None, metavar="PATH", help="Write the summary as key/value CSV.")
    p.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...).")
    return p


def _cli_overrides(args: argparse.Namespace) -> dict:
    upd = {}
    if args.ascii:
        upd.setdefault("render", {})["charset"] = "ascii"
    if args.plot:
        upd.setdefault("plot", {})["save_path"] = args.plot
    if args.json:
        upd.setdefault("export", {})["json"] = args.json
    if args.csv:
        upd.setdefault("export", {})["csv"] = args.csv
    if args.log_level:
        upd.setdefault("logging", {})["level"] = args.log_level
    return upd


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    started = time.perf_counter()

    # ------------------------------------------------------------------
    # 0) Config + logging
    # ------------------------------------------------------------------
    try:
        cfg = load_config(args.config, overrides=_cli_overrides(args))
    except (MazeError, OSError) as e:
        print("Invalid configuration: {}".format(e), file=sys.stderr)
        return 1

    logging.basicConfig(level=cfg["logging"]["level"], format=cfg["logging"]["format"])
    log = logging.getLogger("Pipeloop")

    # ------------------------------------------------------------------
    # 1) Load + solve (any MazeError means the input is not a single loop)
    # ------------------------------------------------------------------
    try:
        grid = load_grid(args.input)
        sol = solve(grid, cfg)
    except (MazeError, OSError) as e:
        print("Cannot solve '{}': {}".format(args.input, e), file=sys.stderr)
        return 1

    # ------------------------------------------------------------------
    # 2) Answers (+ optional rendering)
    # ------------------------------------------------------------------
    if args.render:
        from post.render_text import render_grid
        rc = cfg["render"]
        print(render_grid(
            grid, sol.loop, sol.enclosed,
            charset=rc["charset"],
            border=rc["border"],
            erase_non_loop=rc["erase_non_loop"],
            mark_enclosed=rc["mark_enclosed"],
        ))

    print("Part 1 result: {}".format(sol.farthest_steps))
    print("Part 2 result: {}".format(sol.enclosed_count))

    # ------------------------------------------------------------------
    # 3) Optional plot and exports
    # ------------------------------------------------------------------
    if cfg["plot"]["save_path"] or cfg["plot"]["show"]:
        try:
            from post.plot_maze import plot_loop
            plot_loop(grid, sol.loop, sol.enclosed,
                      show=cfg["plot"]["show"], save_path=cfg["plot"]["save_path"])
            if cfg["plot"]["save_path"]:
                log.info("Plot saved to: %s", cfg["plot"]["save_path"])
        except RuntimeError as e:
            log.warning("Skipping plot: %s", e)

    if cfg["export"]["json"]:
        log.info("Summary written: %s", write_summary_json(sol.summary, cfg["export"]["json"]))
    if cfg["export"]["csv"]:
        log.info("Summary written: %s", write_summary_csv(sol.summary, cfg["export"]["csv"]))

    log.info("Completed in %.3f ms", (time.perf_counter() - started) * 1e3)
    return 0


if __name__ == "__main__":
    sys.exit(main())
