"""Word-fill solver for waffle grids.

Enumerates every way to complete a waffle grid with words from a word index, using the
tiles in the grid's bag.  The search is depth-first with an explicit stack: each state
fills its first open slot with every matching word, in sorted order.  Solutions are
produced in the same order a recursive search would produce them.
"""

from typing import Iterator, TextIO

from wafflesolver.solver.config import config as solver_config
from wafflesolver.solver.stats import FillStats
from wafflesolver.waffle import WaffleGrid
from wafflesolver.wordlist import WordIndex


def find_solutions(
    grid: WaffleGrid,
    index: WordIndex,
    *,
    logf: TextIO | None = None,
    stats: FillStats | None = None,
) -> Iterator[WaffleGrid]:
    """Yield every complete filling of `grid`.

    Args:
        grid: The starting grid, with its fixed letters placed.
        index: Words that may be placed in the slots.
        logf: Optional stream for progress output.
        stats: Optional stats object, updated as the search runs.
    """
    stats = FillStats() if stats is None else stats
    n_slots = len(grid.slots())

    # Each stack entry is a grid state; children are pushed in reverse so the first
    # candidate word is explored first.
    stack: list[WaffleGrid] = [grid]
    while stack:
        current = stack.pop()
        stats.boards_checked += 1
        if logf is not None and stats.boards_checked % solver_config.report_interval == 0:
            print(stats.progress_line(), file=logf, flush=True)

        open_slots = current.open_slots()
        stats.max_depth_reached = max(stats.max_depth_reached, n_slots - len(open_slots))
        if not open_slots:
            stats.solutions += 1
            if logf is not None:
                print(f"Solution {stats.solutions}:", file=logf, flush=True)
                print(current, file=logf, flush=True)
            yield current
            continue

        slot = open_slots[0]
        children: list[WaffleGrid] = []
        for word in index.matching(current.pattern(slot)):
            child = current.with_word(slot, word)
            if child is not None:
                children.append(child)
        stack.extend(reversed(children))

    if logf is not None:
        print(stats.progress_line(), file=logf, flush=True)
