import json

import pytest

import main

SQUARE = "S--7\n|..|\n|..|\nL--J\n"


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SQUARE)
    return path


def test_prints_both_answers(square_file, capsys):
    assert main.main([str(square_file)]) == 0
    out = capsys.readouterr().out
    assert "Part 1 result: 6" in out
    assert "Part 2 result: 4" in out


def test_render_ascii(square_file, capsys):
    assert main.main([str(square_file), "--render", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "|S--7|" in out
    assert "||II||" in out


def test_exports(square_file, tmp_path, capsys):
    jp = tmp_path / "s.json"
    cp = tmp_path / "s.csv"
    assert main.main([str(square_file), "--json", str(jp), "--csv", str(cp)]) == 0
    assert json.loads(jp.read_text())["answers"] == {"farthest_steps": 6, "enclosed": 4}
    assert "answers.enclosed,4" in cp.read_text()


def test_config_file(square_file, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"walk": {"direction_order": ["S", "W", "N", "E"]}}))
    assert main.main([str(square_file), "--config", str(cfg)]) == 0
    assert "Part 2 result: 4" in capsys.readouterr().out


def test_two_starts_fail(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("S--7\n|..|\nL--S\n")
    assert main.main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Cannot solve" in captured.err
    assert "Part 1" not in captured.out


def test_missing_input(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.txt")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_bad_log_level(square_file, capsys):
    assert main.main([str(square_file), "--log-level", "chatty"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_non_utf8_input_fails_cleanly(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"S--7\n\xff\xfe\n")
    assert main.main([str(path)]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_directory_input_fails_cleanly(tmp_path, capsys):
    assert main.main([str(tmp_path)]) == 1
    assert "Cannot solve" in capsys.readouterr().err
