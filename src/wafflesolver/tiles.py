"""Module for the multiset of letters still available to the word-fill solver."""

from typing import Iterable

TileBag = tuple[int, ...]
"""A tuple of 26 integers representing counts of tiles A-Z.

Tile bags are never modified; taking a tile produces a new bag, so every grid state
carries its own independent bag.
"""

EMPTY_BAG: TileBag = (0,) * 26


def tile_index(ch: str) -> int:
    """Return the bag index (0-25) of letter `ch`.

    Raises:
        ValueError: If `ch` is not an ASCII letter.
    """
    upper = ch.upper()
    if len(upper) != 1 or not ("A" <= upper <= "Z"):
        raise ValueError(f"Invalid tile character: {ch!r}")
    return ord(upper) - ord("A")


def create_tile_bag(tiles: Iterable[str]) -> TileBag:
    """Create a tile bag from a string (or iterable) of letters, case-insensitively.

    Raises:
        ValueError: If any character is not an ASCII letter.
    """
    bag = [0] * 26
    for ch in tiles:
        bag[tile_index(ch)] += 1
    return tuple(bag)


def take_tile(bag: TileBag, ch: str) -> TileBag | None:
    """Return `bag` with one `ch` removed, or None if there is no `ch` left."""
    index = tile_index(ch)
    if bag[index] == 0:
        return None
    return bag[:index] + (bag[index] - 1,) + bag[index + 1 :]


def tile_bag_to_string(bag: TileBag) -> str:
    """Convert a tile bag to a string of uppercase letters in alphabetical order."""
    return "".join(chr(ord("A") + i) * count for i, count in enumerate(bag))
