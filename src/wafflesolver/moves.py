"""Candidate move generation for the swap search."""

from itertools import combinations

from wafflesolver.board import Board, Swap


class UnreachableStateError(ValueError):
    """Raised when exactly one cell differs from the target.

    A single wrong cell cannot be fixed by exchanging cell contents, so the board
    pair is not reachable via swaps.
    """


def generate_moves(board: Board, target: Board) -> list[Swap]:
    """Propose the swaps worth exploring from `board` towards `target`.

    Only pairs of currently mismatched cells are proposed: swapping a correct cell
    can never reduce the number of mismatches.

    Args:
        board: The current board.
        target: The board being searched for.

    Returns:
        Every distinct swap between two mismatched cells, in canonical order.  Empty if
        `board` already equals `target`.

    Raises:
        UnreachableStateError: If exactly one cell differs.
        DimensionMismatchError: If the boards have different dimensions.
    """
    differences = board.diff(target)
    if not differences:
        return []
    if len(differences) == 1:
        raise UnreachableStateError(
            f"Only {differences[0]} differs from the target; nothing to swap it with."
        )
    return sorted({Swap(a, b) for a, b in combinations(differences, 2)})
