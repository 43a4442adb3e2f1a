"""Command-line entry points for the Waffle solvers."""

import sys
from contextlib import nullcontext
from pathlib import Path
from typing import TextIO

from wafflesolver.board import DimensionMismatchError
from wafflesolver.loader import load_board
from wafflesolver.player import show_transformation
from wafflesolver.solver.config import config as solver_config
from wafflesolver.solver.fill import find_solutions
from wafflesolver.solver.swaps import SwapSearch
from wafflesolver.waffle import WaffleGrid
from wafflesolver.wordlist import WordIndex, load_word_list

SWAPS_USAGE = "Usage: waffle-swaps <from_board_file> <to_board_file>"
FILL_USAGE = "Usage: waffle-fill <word_list_file> <board_file>"


def _open_log():
    """Open the configured log file for appending, or a null context if none is set."""
    if solver_config.log_file is None:
        return nullcontext(None)
    logfile = Path(solver_config.log_file)
    logfile.parent.mkdir(parents=True, exist_ok=True)
    return open(logfile, "a", encoding="utf-8")


def _check_args(args: list[str], usage: str) -> bool:
    if len(args) != 2:
        print(f"Expected 2 command line arguments but got {len(args)}", file=sys.stderr)
        print(usage, file=sys.stderr)
        return False
    return True


def swaps_main(argv: list[str] | None = None) -> int:
    """Print the shortest swap sequence turning one board file into another.

    Returns:
        The process exit status.
    """
    args = sys.argv[1:] if argv is None else argv
    if not _check_args(args, SWAPS_USAGE):
        return 1

    try:
        from_board = load_board(args[0])
        into_board = load_board(args[1])
        if from_board.dims != into_board.dims:
            raise DimensionMismatchError(
                f"Size mismatch: {from_board.n_rows}x{from_board.n_cols} "
                f"vs {into_board.n_rows}x{into_board.n_cols}"
            )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logf: TextIO | None
    with _open_log() as logf:
        search = SwapSearch(from_board, into_board, logf=logf)
        path = search.run()

    if path is None:
        if search.stats.hit_depth_bound:
            print(f"Could not find a path within {search.max_path_length} swaps.")
        else:
            print("Could not find a path.")
        return 0

    show_transformation(from_board, path)
    return 0


def fill_main(argv: list[str] | None = None) -> int:
    """Print every filling of a waffle board file using words from a word list file.

    Solutions are printed in uppercase, whatever the case of the input letters, each
    followed by a blank line.

    Returns:
        The process exit status.
    """
    args = sys.argv[1:] if argv is None else argv
    if not _check_args(args, FILL_USAGE):
        return 1

    try:
        grid = WaffleGrid.from_file(args[1])
        index = WordIndex(load_word_list(args[0], min_len=grid.size, max_len=grid.size))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logf: TextIO | None
    with _open_log() as logf:
        for solution in find_solutions(grid, index, logf=logf):
            print(solution)
            print()
    return 0
