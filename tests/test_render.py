import numpy as np
import pytest

from maze.topology.interior import enclosed_mask
from maze.topology.walk import extract_loop
from post.render_text import render_grid

SQUARE = ["S--7", "|..|", "|..|", "L--J"]
NOISY = ["-L|F7", "7S-7|", "L|7||", "-L-J|", "L|-JF"]


def _solved(build, rows):
    grid = build(rows)
    loop = extract_loop(grid)
    return grid, loop, enclosed_mask(grid, loop.path, loop.start_shape)


def test_unicode_with_border(build):
    grid, loop, mask = _solved(build, SQUARE)
    assert render_grid(grid, loop, mask) == "\n".join([
        "┌────┐",
        "│S──┐│",
        "││II││",
        "││II││",
        "│└──┘│",
        "└────┘",
    ])


def test_ascii_without_border(build):
    grid, loop, mask = _solved(build, SQUARE)
    out = render_grid(grid, loop, mask, charset="ascii", border=False)
    assert out == "S--7\n|II|\n|II|\nL--J"


def test_erase_non_loop(build):
    grid, loop, mask = _solved(build, NOISY)
    out = render_grid(grid, loop, mask, charset="ascii", border=False).splitlines()
    assert out[0] == "....."
    assert out[1] == ".S-7."
    assert out[2] == ".|I|."


def test_keep_noise_and_skip_marks(build):
    grid, loop, mask = _solved(build, NOISY)
    out = render_grid(grid, loop, mask, charset="ascii", border=False,
                      erase_non_loop=False, mark_enclosed=False)
    assert out.splitlines() == NOISY


def test_plain_grid_ascii_border(build):
    grid = build(["S7", "LJ"])
    assert render_grid(grid, charset="ascii") == "+--+\n|S7|\n|LJ|\n+--+"


def test_bad_arguments(build):
    grid, loop, _ = _solved(build, SQUARE)
    with pytest.raises(ValueError):
        render_grid(grid, loop, charset="ebcdic")
    with pytest.raises(ValueError):
        render_grid(grid, loop, np.zeros((2, 2), dtype=bool))
