import pytest

from maze.loaders.txt_loader import parse_lines


# Grids used across test modules: name -> (rows, loop length, enclosed count)
GRIDS = {
    "minimal": (["S7", "LJ"], 4, 0),
    "square4": (["S--7", "|..|", "|..|", "L--J"], 12, 4),
    "square_padded": ([".....", ".S-7.", ".|.|.", ".L-J.", "....."], 8, 1),
    "square_noisy": (["-L|F7", "7S-7|", "L|7||", "-L-J|", "L|-JF"], 8, 1),
    "bends": (["..F7.", ".FJ|.", "SJ.L7", "|F--J", "LJ..."], 16, 1),
    "notch": (["F-----7", "|.....|", "S.F-7.|", "|.|.|.|", "L-J.L-J"], 24, 9),
    "channels": ([
        "...........",
        ".S-------7.",
        ".|F-----7|.",
        ".||.....||.",
        ".||.....||.",
        ".|L-7.F-J|.",
        ".|..|.|..|.",
        ".L--J.L--J.",
        "...........",
    ], 46, 4),
    "squeezed": ([
        "..........",
        ".S------7.",
        ".|F----7|.",
        ".||....||.",
        ".||....||.",
        ".|L-7F-J|.",
        ".|..||..|.",
        ".L--JL--J.",
        "..........",
    ], 44, 4),
}


@pytest.fixture
def build():
    return parse_lines


@pytest.fixture(params=sorted(GRIDS))
def case(request):
    rows, length, enclosed = GRIDS[request.param]
    return parse_lines(rows), length, enclosed
