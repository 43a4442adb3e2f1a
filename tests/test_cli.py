"""Tests for the command-line entry points."""

from wafflesolver.cli import fill_main, swaps_main
from wafflesolver.solver.config import SolverConfig
from wafflesolver.solver.config import config as solver_config


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_swaps_success(tmp_path, capsys):
    start = _write(tmp_path / "from.txt", "ab\ncd\n")
    target = _write(tmp_path / "to.txt", "ba\ncd\n")
    assert swaps_main([start, target]) == 0
    out = capsys.readouterr().out
    assert out == "ab\ncd\n- swap 'a' at (0,0) with 'b' at (0,1)\nba\ncd\n"


def test_swaps_no_path(tmp_path, capsys):
    start = _write(tmp_path / "from.txt", "aa\n")
    target = _write(tmp_path / "to.txt", "bb\n")
    assert swaps_main([start, target]) == 0
    assert capsys.readouterr().out == "Could not find a path.\n"


def test_swaps_wrong_argument_count(capsys):
    assert swaps_main(["only-one.txt"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: waffle-swaps" in captured.err


def test_swaps_missing_file(tmp_path, capsys):
    target = _write(tmp_path / "to.txt", "ab\n")
    assert swaps_main([str(tmp_path / "missing.txt"), target]) == 1
    assert "Error:" in capsys.readouterr().err


def test_swaps_ragged_file(tmp_path, capsys):
    start = _write(tmp_path / "from.txt", "abc\nd\n")
    target = _write(tmp_path / "to.txt", "abc\ndef\n")
    assert swaps_main([start, target]) == 1
    assert "Error:" in capsys.readouterr().err


def test_swaps_dimension_mismatch(tmp_path, capsys):
    start = _write(tmp_path / "from.txt", "ab\ncd\n")
    target = _write(tmp_path / "to.txt", "abc\ndef\n")
    assert swaps_main([start, target]) == 1
    captured = capsys.readouterr()
    assert "Size mismatch" in captured.err
    assert captured.out == ""


def test_fill(tmp_path, capsys):
    words = _write(tmp_path / "words.txt", "abcde\nijklm\nqrstu\nafinq\ncgkos\nehmpu\nfour\n")
    board = _write(tmp_path / "board.txt", "uBtsr\nq p o\nnmlkj\ni h g\nfedca\n")
    assert fill_main([words, board]) == 0
    assert capsys.readouterr().out == "ABCDE\nF G H\nIJKLM\nN O P\nQRSTU\n\n"


def test_fill_wrong_argument_count(capsys):
    assert fill_main([]) == 1
    assert "Usage: waffle-fill" in capsys.readouterr().err


def test_fill_bad_board(tmp_path, capsys):
    words = _write(tmp_path / "words.txt", "abc\n")
    board = _write(tmp_path / "board.txt", "abc\ndxf\nghi\n")
    assert fill_main([words, board]) == 1
    assert "Error:" in capsys.readouterr().err


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("WAFFLE_MAX_PATH_LENGTH", "12")
    monkeypatch.setenv("WAFFLE_LOG_FILE", "logs/waffle.log")
    settings = SolverConfig()
    assert settings.max_path_length == 12
    assert settings.log_file == "logs/waffle.log"
    assert settings.report_interval == 10_000


def test_swaps_log_file(tmp_path, capsys, monkeypatch):
    logfile = tmp_path / "logs" / "swaps.log"
    monkeypatch.setattr(solver_config, "log_file", str(logfile))
    start = _write(tmp_path / "from.txt", "ab\ncd\n")
    target = _write(tmp_path / "to.txt", "cd\nab\n")
    assert swaps_main([start, target]) == 0
    capsys.readouterr()
    log = logfile.read_text(encoding="utf-8")
    assert "Searching for swaps from:" in log
    assert "Found a path of 2 swaps." in log


def test_swaps_different_letters(tmp_path, capsys, monkeypatch):
    """A pair with different letters is unsolvable, not too deep."""
    monkeypatch.setattr(solver_config, "max_path_length", 3)
    start = _write(tmp_path / "from.txt", "abcdefgh\n")
    target = _write(tmp_path / "to.txt", "bcdefghz\n")
    assert swaps_main([start, target]) == 0
    assert capsys.readouterr().out == "Could not find a path.\n"


def test_swaps_depth_bound_message(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(solver_config, "max_path_length", 3)
    start = _write(tmp_path / "from.txt", "abcdef\n")
    target = _write(tmp_path / "to.txt", "bcdefa\n")
    assert swaps_main([start, target]) == 0
    assert capsys.readouterr().out == "Could not find a path within 3 swaps.\n"
