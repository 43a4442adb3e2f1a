"""Waffle Puzzle Solver.

Solves two puzzles from the word game Waffle:

- finding the shortest sequence of letter swaps that turns one filled grid into
  another (`waffle-swaps`), and
- filling a waffle grid with words from a word list, given the letters on the board
  and the ones fixed in place (`waffle-fill`).
"""

from wafflesolver.board import (
    Board,
    BoardFormatError,
    Coord,
    DimensionMismatchError,
    OutOfBoundsError,
    Swap,
)
from wafflesolver.moves import UnreachableStateError, generate_moves
from wafflesolver.solver.swaps import SwapSearch, find_swaps

__all__ = [
    "Board",
    "BoardFormatError",
    "Coord",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "Swap",
    "SwapSearch",
    "UnreachableStateError",
    "find_swaps",
    "generate_moves",
]
