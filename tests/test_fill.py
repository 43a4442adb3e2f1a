"""Tests for the word-fill solver."""

import io

from wafflesolver.solver.fill import find_solutions
from wafflesolver.solver.stats import FillStats
from wafflesolver.waffle import WaffleGrid
from wafflesolver.wordlist import WordIndex

SOLUTION = "ABCDE\nF G H\nIJKLM\nN O P\nQRSTU"

WORDS = [
    "abcde",
    "ijklm",
    "qrstu",
    "afinq",
    "cgkos",
    "ehmpu",
    # Decoys that fit some patterns but never complete a grid
    "abxyz",
    "qrsxu",
    "aaaaa",
]


def test_fixed_letter_gives_unique_solution():
    grid = WaffleGrid.from_lines(["uBtsr", "q p o", "nmlkj", "i h g", "fedca"])
    stats = FillStats()
    solutions = list(find_solutions(grid, WordIndex(WORDS), stats=stats))
    assert [str(s) for s in solutions] == [SOLUTION]
    assert sum(solutions[0].bag) == 0
    assert stats.solutions == 1
    assert stats.max_depth_reached == 6


def test_without_fixed_letters_transpose_is_found():
    """With no letter fixed, the transposed grid is also a solution."""
    grid = WaffleGrid.from_lines(["utbsr", "q p o", "nmlkj", "i h g", "fedca"])
    solutions = [str(s) for s in find_solutions(grid, WordIndex(WORDS))]
    transposed = "AFINQ\nB J R\nCGKOS\nD L T\nEHMPU"
    assert solutions == sorted(solutions)
    assert set(solutions) == {SOLUTION, transposed}


def test_no_solution():
    grid = WaffleGrid.from_lines(["uBtsr", "q p o", "nmlkj", "i h g", "fedca"])
    assert list(find_solutions(grid, WordIndex(["abcde", "vwxyz"]))) == []


def test_already_complete_grid():
    grid = WaffleGrid.from_lines(SOLUTION.splitlines())
    assert list(find_solutions(grid, WordIndex(WORDS))) == [grid]


def test_progress_logging():
    grid = WaffleGrid.from_lines(["uBtsr", "q p o", "nmlkj", "i h g", "fedca"])
    logf = io.StringIO()
    list(find_solutions(grid, WordIndex(WORDS), logf=logf))
    output = logf.getvalue()
    assert "Solution 1:" in output
    assert "Checked" in output
