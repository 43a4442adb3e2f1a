"""Classes and functions for representing a filled game board."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np


class BoardFormatError(ValueError):
    """Raised when a grid is empty, ragged, or does not have the expected layout."""


class DimensionMismatchError(ValueError):
    """Raised when two boards of different sizes are compared."""


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the board."""


class Coord(NamedTuple):
    """A `(row, col)` position on the board.  Ordered row-major."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True, order=True)
class Swap:
    """An unordered pair of coordinates whose contents are exchanged.

    Stored as `(min, max)`, so `Swap(a, b) == Swap(b, a)`.
    """

    a: Coord
    """The smaller of the two coordinates."""

    b: Coord
    """The larger of the two coordinates."""

    def __post_init__(self) -> None:
        a, b = Coord(*self.a), Coord(*self.b)
        if a == b:
            raise ValueError(f"Cannot swap {a} with itself.")
        if b < a:
            a, b = b, a
        # Frozen dataclass: bypass __setattr__ to store the canonical order
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    def __str__(self) -> str:
        return f"{self.a}-{self.b}"


class Board:
    """Immutable 2D grid of single characters.

    Equality and hashing are by content, so boards can be used as dictionary keys
    during the swap search.
    """

    __slots__ = ("rows", "n_rows", "n_cols", "_grid", "_hash")

    def __init__(self, rows: Iterable[str]) -> None:
        rows = tuple(rows)
        if not rows or not rows[0]:
            raise BoardFormatError("Expected at least one non-empty row.")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise BoardFormatError(
                    f"Expected all rows to have length {width}; row {i} has length {len(row)}."
                )

        self.rows: tuple[str, ...] = rows
        """Board contents, one string per row."""

        self.n_rows: int = len(rows)
        """Number of rows in the board."""

        self.n_cols: int = width
        """Number of columns in the board."""

        # Character matrix used for vectorised comparisons
        self._grid = np.array([list(row) for row in rows], dtype="<U1")
        self._hash = hash(rows)

    @property
    def dims(self) -> tuple[int, int]:
        """The `(n_rows, n_cols)` shape of the board."""
        return (self.n_rows, self.n_cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({list(self.rows)!r})"

    def __str__(self) -> str:
        """Returns the rows joined by newlines."""
        return "\n".join(self.rows)

    def __getitem__(self, coord: tuple[int, int]) -> str:
        """Get cell content at `(row, col)`."""
        row, col = self._check_bounds(coord)
        return self.rows[row][col]

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        """Whether `coord` lies on the board."""
        row, col = coord
        return 0 <= row < self.n_rows and 0 <= col < self.n_cols

    def _check_bounds(self, coord: tuple[int, int]) -> Coord:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(
                f"Coordinate {tuple(coord)} is outside a {self.n_rows}x{self.n_cols} board."
            )
        return Coord(*coord)

    def letter_counts(self) -> Counter[str]:
        """Return the multiset of characters on the board."""
        return Counter("".join(self.rows))

    def diff(self, other: "Board") -> list[Coord]:
        """Get the coordinates at which this board and `other` disagree, in row-major order.

        Raises:
            DimensionMismatchError: If the boards have different dimensions.
        """
        if self.dims != other.dims:
            raise DimensionMismatchError(
                f"Size mismatch: {self.n_rows}x{self.n_cols} vs {other.n_rows}x{other.n_cols}"
            )
        return [Coord(int(r), int(c)) for r, c in np.argwhere(self._grid != other._grid)]

    def distance(self, other: "Board") -> int:
        """Number of cells at which this board and `other` differ."""
        return len(self.diff(other))

    def apply(self, swap: Swap) -> "Board":
        """Return a new board with the cells at `swap.a` and `swap.b` exchanged.

        Raises:
            OutOfBoundsError: If either coordinate is outside the board.
        """
        a = self._check_bounds(swap.a)
        b = self._check_bounds(swap.b)
        cells = [list(row) for row in self.rows]
        cells[a.row][a.col], cells[b.row][b.col] = cells[b.row][b.col], cells[a.row][a.col]
        return Board("".join(row) for row in cells)
