import pytest

from maze.topology.area import enclosed_by_area, orientation, signed_area
from maze.topology.interior import count_enclosed
from maze.topology.walk import extract_loop


def test_unit_square_area():
    path = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert signed_area(path) == pytest.approx(-1.0)
    assert orientation(path) == "CW"
    assert orientation(path[::-1]) == "CCW"
    assert enclosed_by_area(path) == 0


def test_square_loop_area(build):
    loop = extract_loop(build(["S--7", "|..|", "|..|", "L--J"]))
    assert abs(signed_area(loop.path)) == pytest.approx(9.0)
    assert enclosed_by_area(loop.path) == 4


def test_pick_agrees_with_scanline(case):
    grid, _, enclosed = case
    loop = extract_loop(grid)
    assert enclosed_by_area(loop.path) == enclosed
    assert count_enclosed(grid, loop.path, loop.start_shape) == enclosed_by_area(loop.path)


def test_too_few_points():
    with pytest.raises(ValueError):
        signed_area([(0, 0), (1, 0)])
