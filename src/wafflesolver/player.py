"""Step-by-step replay of a swap path."""

import sys
from typing import Iterable, Iterator, TextIO

from wafflesolver.board import Board, Swap


def describe_swap(board: Board, swap: Swap) -> str:
    """Describe `swap` using the letters on `board` before the swap is applied."""
    return f"- swap '{board[swap.a]}' at {swap.a} with '{board[swap.b]}' at {swap.b}"


def replay(start: Board, path: Iterable[Swap]) -> Iterator[tuple[Swap, Board, Board]]:
    """Apply the swaps in `path` to `start` in order.

    Yields:
        A `(swap, before, after)` tuple for each step.
    """
    board = start
    for swap in path:
        after = board.apply(swap)
        yield swap, board, after
        board = after


def final_board(start: Board, path: Iterable[Swap]) -> Board:
    """Return the board obtained by applying every swap in `path` to `start`."""
    board = start
    for _, _, board in replay(start, path):
        pass
    return board


def show_transformation(start: Board, path: Iterable[Swap], file: TextIO | None = None) -> None:
    """Print `start`, then each swap followed by the board it produces."""
    out = sys.stdout if file is None else file
    print(start, file=out)
    for swap, before, after in replay(start, path):
        print(describe_swap(before, swap), file=out)
        print(after, file=out)
