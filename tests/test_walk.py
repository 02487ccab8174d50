import pytest

from maze.errors import LoopError, StartShapeError
from maze.model.tiles import Direction, Tile
from maze.topology.walk import LoopResult, extract_loop, initial_direction, resolve_start_shape

REVERSED = (Direction.WEST, Direction.SOUTH, Direction.EAST, Direction.NORTH)


def test_minimal_loop(build):
    grid = build(["S7", "LJ"])
    loop = extract_loop(grid)
    assert loop.path == ((0, 0), (1, 0), (1, 1), (0, 1))
    assert len(loop) == 4
    assert loop.start == (0, 0)
    assert loop.start_dir is Direction.EAST
    assert loop.end_dir is Direction.NORTH
    assert loop.start_shape is Tile.BEND_SE


def test_square_loop(build):
    loop = extract_loop(build(["S--7", "|..|", "|..|", "L--J"]))
    assert len(loop) == 12
    assert loop.start_shape is Tile.BEND_SE
    assert loop.positions == frozenset(loop.path)
    assert (1, 1) not in loop.positions


def test_vertical_start_resolved(build):
    loop = extract_loop(build(["F-----7", "|.....|", "S.F-7.|", "|.|.|.|", "L-J.L-J"]))
    assert loop.start == (0, 2)
    assert loop.start_dir is Direction.NORTH
    assert loop.start_shape is Tile.VERTICAL


def test_path_is_closed_and_connected(case):
    grid, length, _ = case
    loop = extract_loop(grid)
    assert len(loop) == length
    assert len(loop) % 2 == 0
    assert len(loop) >= 4
    assert len(set(loop.path)) == len(loop.path)
    ring = loop.path + (loop.path[0],)
    for (x0, y0), (x1, y1) in zip(ring, ring[1:]):
        assert abs(x0 - x1) + abs(y0 - y1) == 1


def test_noise_tiles_are_not_part_of_loop(build):
    grid = build(["-L|F7", "7S-7|", "L|7||", "-L-J|", "L|-JF"])
    loop = extract_loop(grid)
    assert len(loop) == 8
    assert (2, 2) not in loop.positions
    assert loop.tile_at(grid, (1, 1)) is Tile.BEND_SE
    assert loop.tile_at(grid, (2, 1)) is Tile.HORIZONTAL


def test_extraction_is_deterministic(case):
    grid, _, _ = case
    assert extract_loop(grid) == extract_loop(grid)


def test_reversed_tie_break_walks_same_cycle_backwards(case):
    grid, _, _ = case
    fwd = extract_loop(grid)
    rev = extract_loop(grid, direction_order=REVERSED)
    assert rev.path == (fwd.path[0],) + tuple(reversed(fwd.path[1:]))
    assert rev.start_shape is fwd.start_shape


def test_initial_direction_follows_order(build):
    grid = build(["S7", "LJ"])
    assert initial_direction(grid, grid.start) is Direction.EAST
    assert initial_direction(grid, grid.start, REVERSED) is Direction.SOUTH


def test_isolated_start(build):
    with pytest.raises(LoopError):
        extract_loop(build(["S.", ".."]))


def test_walk_off_grid(build):
    with pytest.raises(LoopError) as exc:
        extract_loop(build(["S--"]))
    assert exc.value.context["pos"] == (3, 0)


def test_walk_into_dead_end(build):
    with pytest.raises(LoopError) as exc:
        extract_loop(build(["S-7", "..."]))
    assert exc.value.context["pos"] == (2, 1)


def test_resolve_start_shape():
    assert resolve_start_shape(Direction.EAST, Direction.NORTH) is Tile.BEND_SE
    assert resolve_start_shape(Direction.NORTH, Direction.NORTH) is Tile.VERTICAL
    assert resolve_start_shape(Direction.WEST, Direction.SOUTH) is Tile.BEND_NW
    with pytest.raises(StartShapeError):
        resolve_start_shape(Direction.NORTH, Direction.SOUTH)


def test_loop_mask(build):
    grid = build(["-L|F7", "7S-7|", "L|7||", "-L-J|", "L|-JF"])
    loop = extract_loop(grid)
    mask = loop.loop_mask(grid.shape)
    assert mask.sum() == 8
    assert mask[1, 1] and not mask[2, 2] and not mask[0, 0]


def test_loop_result_is_frozen(build):
    loop = extract_loop(build(["S7", "LJ"]))
    assert isinstance(loop, LoopResult)
    with pytest.raises(AttributeError):
        loop.start_shape = Tile.VERTICAL
