"""Loaders for board files."""

from os import PathLike
from pathlib import Path

from wafflesolver.board import Board, BoardFormatError


def read_grid_lines(path: str | PathLike) -> list[str]:
    """Read the rows of a grid file.

    The file is read as UTF-8 and split on line breaks; a trailing newline does not
    produce an extra row.

    Raises:
        OSError: If the file is missing or unreadable.
        BoardFormatError: If the file is empty or its lines differ in length.
    """
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    if not lines or not lines[0]:
        raise BoardFormatError(f"{path}: expected at least one non-empty line.")
    width = len(lines[0])
    for lineno, line in enumerate(lines, start=1):
        if len(line) != width:
            raise BoardFormatError(
                f"{path}: expected all lines to have length {width}; "
                f"line {lineno} has length {len(line)}."
            )
    return lines


def load_board(path: str | PathLike) -> Board:
    """Load a filled board from a text file, one row per line."""
    return Board(read_grid_lines(path))
