from maze.errors import ConfigError, LoopError, MazeError, ParseError, StartShapeError, StartTileError


def test_context_suffix_is_sorted_and_compact():
    err = MazeError("Bad grid.", {"row": 2, "char": "X"})
    assert str(err) == "Bad grid. | char='X', row=2"


def test_no_context():
    assert str(LoopError("Walk left the grid.")) == "Walk left the grid."
    assert LoopError("x").context is None


def test_long_values_are_truncated():
    err = ParseError("Too long.", {"line": "-" * 500})
    assert str(err).endswith("...")
    assert len(str(err)) < 160


def test_hierarchy():
    for cls in (ParseError, StartTileError, LoopError, StartShapeError, ConfigError):
        assert issubclass(cls, MazeError)
