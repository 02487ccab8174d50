# -*- coding: utf-8 -*-
# Pipeloop/post/plot_maze.py

"""
Project: Pipeloop
Author: Erfan Vaezi
Date: 10/16/2026

Purpose
-------
Quick visualization of a solved maze with matplotlib: the loop as a closed polyline
through cell centres, enclosed cells as filled squares, the start as a marker.

Main Tasks
----------
    1) Import pyplot with a headless-safe backend when no display is available.
    2) Draw loop, enclosed cells, and the start in screen orientation (row 0 on top).
    3) Save and/or show the figure.
"""

import os
from typing import Optional

import numpy as np

from maze.model.grid import PipeGrid
from maze.topology.walk import LoopResult

__all__ = ["plot_loop"]


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Agg when DISPLAY is not set, to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e)) from e


def plot_loop(grid: PipeGrid,
              loop: LoopResult,
              enclosed: Optional[np.ndarray] = None,
              *,
              show: bool = False,
              save_path: Optional[str] = None,
              ax=None,
              title: Optional[str] = None):
    """
    Plot the loop polyline and enclosed cells.

    Parameters
    ----------
    grid : PipeGrid
    loop : LoopResult
    enclosed : np.ndarray, optional
        (H, W) boolean mask of enclosed cells.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : matplotlib.axes.Axes, optional
        Existing Axes to draw on; if None, a figure is created.

    Returns
    -------
    matplotlib.axes.Axes
    """
    plt = _get_pyplot()
    created_fig = False
    if ax is None:
        scale = 8.0 / max(grid.width, grid.height)
        plt.figure(figsize=(max(3.0, grid.width * scale), max(3.0, grid.height * scale)))
        ax = plt.gca()
        created_fig = True

    pts = np.asarray(loop.path + (loop.path[0],), dtype=float)
    ax.plot(pts[:, 0], pts[:, 1], lw=1.5, color="tab:blue", label="loop ({})".format(len(loop)))

    if enclosed is not None and enclosed.any():
        ys, xs = np.nonzero(enclosed)
        ax.scatter(xs, ys, marker="s", s=12, color="tab:orange",
                   label="enclosed ({})".format(int(enclosed.sum())))

    sx, sy = loop.start
    ax.plot([sx], [sy], marker="o", color="tab:red", label="start ({})".format(loop.start_shape.char))

    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(grid.height - 0.5, -0.5)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(title or "Pipe loop")
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.legend(loc="upper right", fontsize="small")

    if save_path:
        ax.figure.savefig(save_path, dpi=150)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax
