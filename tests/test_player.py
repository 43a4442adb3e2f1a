"""Tests for path replay and rendering."""

import io

from wafflesolver.board import Board, Swap
from wafflesolver.player import describe_swap, final_board, replay, show_transformation


def test_describe_swap_uses_letters_before_swap():
    board = Board(["ab", "cd"])
    assert describe_swap(board, Swap((1, 0), (0, 0))) == "- swap 'a' at (0,0) with 'c' at (1,0)"


def test_replay_yields_each_step_in_order():
    start = Board(["ab", "cd"])
    path = [Swap((0, 0), (1, 0)), Swap((0, 1), (1, 1))]
    steps = list(replay(start, path))
    assert [swap for swap, _, _ in steps] == path
    assert steps[0][1] == start
    assert steps[0][2] == Board(["cb", "ad"])
    assert steps[1][1] == steps[0][2]
    assert steps[1][2] == Board(["cd", "ab"])


def test_final_board():
    start = Board(["abc"])
    assert final_board(start, []) == start
    assert final_board(start, [Swap((0, 0), (0, 1)), Swap((0, 1), (0, 2))]) == Board(["bca"])


def test_show_transformation():
    out = io.StringIO()
    show_transformation(Board(["ab", "cd"]), [Swap((0, 0), (0, 1))], file=out)
    assert out.getvalue() == "ab\ncd\n- swap 'a' at (0,0) with 'b' at (0,1)\nba\ncd\n"


def test_show_transformation_empty_path():
    out = io.StringIO()
    show_transformation(Board(["ab"]), [], file=out)
    assert out.getvalue() == "ab\n"
