"""Waffle grid state for the word-fill solver.

A waffle is a square grid of odd side length.  Every even row and every even column is a
word; the cells with an odd row and an odd column are holes.  For a 5x5 waffle:

    ABCDE
    F G H
    IJKLM
    N O P
    QRSTU

In an input file, uppercase letters are fixed in place, while lowercase letters are only
known to be somewhere on the board.  All letters, fixed or not, make up the multiset of
tiles available for the fill.  Any other character, such as a space, "." or "#", marks an
unknown cell or a hole.
"""

from enum import IntEnum
from os import PathLike
from typing import NamedTuple

import numpy as np

from wafflesolver.board import BoardFormatError
from wafflesolver.loader import read_grid_lines
from wafflesolver.tiles import TileBag, create_tile_bag, take_tile


class Direction(IntEnum):
    """Enumeration for word slot directions."""

    ACROSS = 0
    DOWN = 1


class Slot(NamedTuple):
    """A word slot: the full row (ACROSS) or column (DOWN) at an even `index`."""

    direction: Direction
    index: int

    def cells(self, size: int) -> list[tuple[int, int]]:
        """The `(row, col)` cells of this slot on a waffle of side `size`."""
        if self.direction == Direction.ACROSS:
            return [(self.index, col) for col in range(size)]
        return [(row, self.index) for row in range(size)]


def is_letter_cell(row: int, col: int) -> bool:
    """Whether `(row, col)` holds a letter (rather than a hole) on a waffle."""
    return row % 2 == 0 or col % 2 == 0


def _is_tile(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class WaffleGrid:
    """Immutable partially-filled waffle, plus the tiles not yet placed on it."""

    __slots__ = ("size", "cells", "bag")

    def __init__(self, size: int, cells: tuple[str | None, ...], bag: TileBag) -> None:
        self.size: int = size
        """Side length of the grid."""

        self.cells: tuple[str | None, ...] = cells
        """Row-major cell contents: an uppercase letter, or None if unset or a hole."""

        self.bag: TileBag = bag
        """Tiles still available for placement."""

    @classmethod
    def empty(cls, size: int, bag: TileBag) -> "WaffleGrid":
        """Create a grid with no letters placed."""
        if size < 1 or size % 2 == 0:
            raise BoardFormatError(f"Waffle side length must be odd; got {size}.")
        return cls(size, (None,) * (size * size), bag)

    @classmethod
    def from_lines(cls, lines: list[str]) -> "WaffleGrid":
        """Build a grid from the rows of an input board.

        Uppercase letters are placed as fixed letters; every letter on the board is
        counted as an available tile.  Any character other than an ASCII letter marks an
        unknown cell or a hole.

        Raises:
            BoardFormatError: If the board is not a square of odd side, or has a letter in
                a hole.
        """
        size = len(lines)
        if any(len(line) != size for line in lines):
            raise BoardFormatError(f"Expected a square board; got {size} rows of unequal width.")
        grid = np.array([list(line) for line in lines], dtype="<U1")

        for row, col in np.ndindex(grid.shape):
            if not _is_tile(grid[row, col]):
                continue
            if not is_letter_cell(row, col):
                raise BoardFormatError(
                    f"Expected a hole at ({row},{col}); found {grid[row, col]!r}."
                )

        letters = [ch for ch in grid.flat if _is_tile(ch)]
        ret = cls.empty(size, create_tile_bag(letters))
        for row, col in np.ndindex(grid.shape):
            ch = str(grid[row, col])
            if not _is_tile(ch) or not ch.isupper():
                continue
            placed = ret.with_letter(row, col, ch)
            if placed is None:
                raise BoardFormatError(
                    f"Not enough '{ch}' tiles for fixed letter at ({row},{col})."
                )
            ret = placed
        return ret

    @classmethod
    def from_file(cls, path: str | PathLike) -> "WaffleGrid":
        """Load a waffle board file."""
        return cls.from_lines(read_grid_lines(path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WaffleGrid):
            return NotImplemented
        return (self.size, self.cells, self.bag) == (other.size, other.cells, other.bag)

    def __hash__(self) -> int:
        return hash((self.size, self.cells, self.bag))

    def __str__(self) -> str:
        """Rows joined by newlines; unset cells and holes are spaces."""
        return "\n".join(
            "".join(self.get(row, col) or " " for col in range(self.size))
            for row in range(self.size)
        )

    def get(self, row: int, col: int) -> str | None:
        """Letter at `(row, col)`, or None if it is unset or a hole."""
        return self.cells[row * self.size + col]

    def slots(self) -> list[Slot]:
        """All word slots: rows first, then columns, each in ascending index."""
        indexes = range(0, self.size, 2)
        return [Slot(Direction.ACROSS, i) for i in indexes] + [
            Slot(Direction.DOWN, i) for i in indexes
        ]

    def open_slots(self) -> list[Slot]:
        """Slots with at least one unset cell, in `slots()` order."""
        return [
            slot
            for slot in self.slots()
            if any(self.get(row, col) is None for row, col in slot.cells(self.size))
        ]

    def pattern(self, slot: Slot) -> str:
        """The current contents of `slot`, with '.' for unset cells."""
        return "".join(self.get(row, col) or "." for row, col in slot.cells(self.size))

    def with_letter(self, row: int, col: int, ch: str) -> "WaffleGrid | None":
        """Return a grid with `ch` placed at `(row, col)`.

        Returns:
            This grid if the cell already holds `ch`, or None if no `ch` tile is left.

        Raises:
            ValueError: If the cell is a hole or already holds a different letter.
        """
        if not is_letter_cell(row, col):
            raise ValueError(f"Cannot place {ch!r} in the hole at ({row},{col}).")
        ch = ch.upper()
        current = self.get(row, col)
        if current is not None:
            if current == ch:
                return self
            raise ValueError(f"Cannot set ({row},{col}) to {ch}: already set to {current}.")

        bag = take_tile(self.bag, ch)
        if bag is None:
            return None
        idx = row * self.size + col
        cells = self.cells[:idx] + (ch,) + self.cells[idx + 1 :]
        return WaffleGrid(self.size, cells, bag)

    def with_word(self, slot: Slot, word: str) -> "WaffleGrid | None":
        """Return a grid with `word` placed along `slot`, or None if the tiles run out.

        Raises:
            ValueError: If the word length does not match the slot, or the word conflicts
                with a letter already on the grid.
        """
        cells = slot.cells(self.size)
        if len(word) != len(cells):
            raise ValueError(f"Word {word!r} does not fit a slot of length {len(cells)}.")

        grid: WaffleGrid | None = self
        cursor = 0
        while grid is not None and cursor < len(cells):
            row, col = cells[cursor]
            grid = grid.with_letter(row, col, word[cursor])
            cursor += 1
        return grid
