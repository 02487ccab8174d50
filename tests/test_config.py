import json

import pytest

from maze.config import DEFAULTS, deep_merge, load_config, validate_config
from maze.errors import ConfigError, MazeError
from maze.model.tiles import Direction


def test_defaults_validate():
    cfg = load_config()
    assert cfg["walk"]["direction_order"] == (
        Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST,
    )
    assert cfg["render"]["charset"] == "unicode"
    assert cfg["logging"]["level"] == "INFO"
    # DEFAULTS itself is untouched
    assert DEFAULTS["walk"]["direction_order"] == ["N", "E", "S", "W"]


def test_deep_merge_is_right_biased_and_pure():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    upd = {"a": {"c": 20}, "e": 5}
    out = deep_merge(base, upd)
    assert out == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}
    assert deep_merge(base, None) == base


def test_overrides_and_names():
    cfg = load_config(overrides={"walk": {"direction_order": ["west", "S", "East", "n"]},
                                 "logging": {"level": "debug"}})
    assert cfg["walk"]["direction_order"] == (
        Direction.WEST, Direction.SOUTH, Direction.EAST, Direction.NORTH,
    )
    assert cfg["logging"]["level"] == "DEBUG"


def test_validated_config_validates_again():
    cfg = load_config()
    assert validate_config(cfg) is cfg


@pytest.mark.parametrize("upd", [
    {"walk": {"direction_order": ["N", "N", "E", "S"]}},
    {"walk": {"direction_order": ["N", "E", "S"]}},
    {"walk": {"direction_order": ["N", "E", "S", "up"]}},
    {"walk": {"direction_order": None}},
    {"render": {"charset": "fancy"}},
    {"logging": {"level": "loud"}},
])
def test_invalid_values(upd):
    with pytest.raises(ConfigError):
        load_config(overrides=upd)


def test_load_from_file(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"render": {"charset": "ascii", "border": False}}))
    cfg = load_config(str(path), overrides={"render": {"border": True}})
    assert cfg["render"]["charset"] == "ascii"
    assert cfg["render"]["border"] is True
    assert cfg["render"]["erase_non_loop"] is True


def test_bad_files(tmp_path):
    not_json = tmp_path / "bad.json"
    not_json.write_text("{nope")
    with pytest.raises(ConfigError):
        load_config(str(not_json))

    a_list = tmp_path / "list.json"
    a_list.write_text("[1, 2]")
    with pytest.raises(MazeError):
        load_config(str(a_list))

    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))
