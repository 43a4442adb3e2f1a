"""Minimum-swap path search between two boards.

Finds the shortest sequence of cell swaps that turns a start board into a target board.
The search is best-first over board states: the frontier is ordered by distance to the
target, ties broken by path length and then by the swap sequence itself, so the result is
deterministic.  Only swaps that strictly reduce the distance are explored, which bounds the
depth of any branch by the initial distance and guarantees termination.

Once a goal is found, the remaining frontier is drained with branch-and-bound: a state whose
path length plus `ceil(distance / 2)` (a swap fixes at most two cells) cannot beat the best
goal is pruned.  This makes the returned path minimal rather than merely the first found.
"""

from typing import NamedTuple, TextIO

from sortedcontainers import SortedList

from wafflesolver.board import Board, DimensionMismatchError, Swap
from wafflesolver.moves import UnreachableStateError, generate_moves
from wafflesolver.solver.config import config as solver_config
from wafflesolver.solver.stats import SearchStats

Path = tuple[Swap, ...]


class _FrontierEntry(NamedTuple):
    distance: int
    path: Path
    board: Board


def _frontier_key(entry: _FrontierEntry) -> tuple[int, int, Path]:
    return (entry.distance, len(entry.path), entry.path)


def _min_swaps_left(distance: int) -> int:
    """Lower bound on the swaps needed to fix `distance` mismatched cells."""
    return (distance + 1) // 2


class SwapSearch:
    """A single search for the shortest swap path from `start` to `target`."""

    def __init__(
        self,
        start: Board,
        target: Board,
        *,
        max_path_length: int | None = None,
        logf: TextIO | None = None,
    ) -> None:
        """Prepare a search.

        Args:
            start: The board to transform.
            target: The board to reach.
            max_path_length: Depth bound; paths of this many swaps are not extended.
                Defaults to the configured `max_path_length`.
            logf: Optional stream for progress output.

        Raises:
            DimensionMismatchError: If the boards have different dimensions.
        """
        if start.dims != target.dims:
            raise DimensionMismatchError(
                f"Size mismatch: {start.n_rows}x{start.n_cols} vs {target.n_rows}x{target.n_cols}"
            )
        self.start = start
        self.target = target

        self.max_path_length: int = (
            solver_config.max_path_length if max_path_length is None else max_path_length
        )
        """Depth bound for this search."""

        self.logf = logf
        self.stats: SearchStats = SearchStats()
        """Statistics collected during `run()`."""

    def _log(self, message: str) -> None:
        if self.logf is not None:
            print(message, file=self.logf, flush=True)

    def expand(self, board: Board, path: Path) -> list[tuple[Board, Path]]:
        """Return the successors of `board` that the search would enqueue.

        Successors are produced in canonical swap order, and each one is strictly closer
        to the target than `board`.  Does not consult or modify the search state.

        Raises:
            UnreachableStateError: If exactly one cell of `board` differs from the target.
        """
        distance = board.distance(self.target)
        successors: list[tuple[Board, Path]] = []
        for swap in generate_moves(board, self.target):
            next_board = board.apply(swap)
            if next_board.distance(self.target) >= distance:
                continue
            successors.append((next_board, path + (swap,)))
        return successors

    def run(self) -> list[Swap] | None:
        """Run the search.

        Returns:
            The shortest list of swaps transforming `start` into `target`, or None if no
            such path was found.  An empty list means the boards are already equal.
        """
        self.stats = stats = SearchStats()
        if self.start == self.target:
            return []

        # Swaps preserve the letters on the board
        if self.start.letter_counts() != self.target.letter_counts():
            self._log("Start and target boards hold different letters; no path exists.")
            return None

        self._log("Searching for swaps from:")
        self._log(str(self.start))
        self._log("to:")
        self._log(str(self.target))

        best_paths: dict[Board, Path] = {self.start: ()}
        frontier: SortedList = SortedList(key=_frontier_key)
        frontier.add(_FrontierEntry(self.start.distance(self.target), (), self.start))
        stats.boards_discovered = 1
        stats.max_frontier = 1

        solution: Path | None = None

        while frontier:
            distance, path, board = frontier.pop(0)

            # A shorter path to this board was found after this entry was queued
            if len(path) > len(best_paths[board]):
                continue

            stats.boards_checked += 1
            if stats.boards_checked % solver_config.report_interval == 0:
                self._log(stats.progress_line())

            if distance == 0:
                if solution is None or len(path) < len(solution):
                    solution = path
                    self._log(f"Found a path of {len(path)} swaps.")
                continue

            if solution is not None and len(path) + _min_swaps_left(distance) >= len(solution):
                continue

            if len(path) >= self.max_path_length:
                stats.depth_bound_hits += 1
                continue

            try:
                successors = self.expand(board, path)
            except UnreachableStateError as e:
                stats.dead_ends += 1
                self._log(f"Dead end: {e}")
                continue

            for next_board, next_path in successors:
                known = best_paths.get(next_board)
                if known is not None and len(known) <= len(next_path):
                    continue
                if known is None:
                    stats.boards_discovered += 1
                best_paths[next_board] = next_path
                frontier.add(
                    _FrontierEntry(next_board.distance(self.target), next_path, next_board)
                )
            stats.max_frontier = max(stats.max_frontier, len(frontier))

        self._log(stats.progress_line())
        if solution is None:
            self._log("No path found.")
            return None
        return list(solution)


def find_swaps(
    start: Board,
    target: Board,
    *,
    max_path_length: int | None = None,
    logf: TextIO | None = None,
) -> list[Swap] | None:
    """Find the shortest list of swaps transforming `start` into `target`.

    See `SwapSearch` for the arguments.  Returns None when no path exists within the
    depth bound.
    """
    return SwapSearch(start, target, max_path_length=max_path_length, logf=logf).run()
