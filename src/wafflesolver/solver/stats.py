"""Statistics and progress formatting shared by the solvers."""

from dataclasses import dataclass, field
from time import time


def time_str(seconds: float) -> str:
    """Format a duration as "HH:MM:SS.ss"."""
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    boards_checked: int = 0
    """Number of states taken off the frontier (or stack) and examined."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""

    def elapsed(self) -> str:
        """Time since `start_time`, formatted by `time_str`."""
        return time_str(time() - self.start_time)

    def progress_line(self) -> str:
        """One-line progress report."""
        return f"Checked {int_comma(self.boards_checked)} board states after {self.elapsed()}."


@dataclass
class SearchStats(SolverStats):
    """Statistics collected during a swap search."""

    boards_discovered: int = 0
    """Number of distinct boards entered into the best-path mapping (including the start)."""

    depth_bound_hits: int = 0
    """Number of states not expanded because their path reached the depth bound."""

    dead_ends: int = 0
    """Number of states with exactly one mismatched cell."""

    max_frontier: int = 0
    """Largest frontier size seen."""

    @property
    def hit_depth_bound(self) -> bool:
        """Whether the depth bound cut off at least one branch."""
        return self.depth_bound_hits > 0

    def progress_line(self) -> str:
        return (
            f"Checked {int_comma(self.boards_checked)} board states after {self.elapsed()}; "
            f"{int_comma(self.boards_discovered)} discovered, "
            f"frontier peak {int_comma(self.max_frontier)}."
        )


@dataclass
class FillStats(SolverStats):
    """Statistics collected while filling a waffle grid."""

    solutions: int = 0
    """Number of complete fillings found."""

    max_depth_reached: int = 0
    """Largest number of words placed on any examined state."""

    def progress_line(self) -> str:
        return (
            f"Checked {int_comma(self.boards_checked)} board states after {self.elapsed()}; "
            f"max depth {self.max_depth_reached}, {int_comma(self.solutions)} solutions."
        )
