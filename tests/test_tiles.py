"""Tests for tile bags."""

import pytest

from wafflesolver.tiles import EMPTY_BAG, create_tile_bag, take_tile, tile_bag_to_string


def test_create_tile_bag_is_case_insensitive():
    bag = create_tile_bag("aBbz")
    assert bag[0] == 1
    assert bag[1] == 2
    assert bag[25] == 1
    assert sum(bag) == 4
    assert tile_bag_to_string(bag) == "ABBZ"


def test_create_tile_bag_rejects_non_letters():
    with pytest.raises(ValueError):
        create_tile_bag("ab1")


def test_take_tile_returns_new_bag():
    bag = create_tile_bag("AAB")
    taken = take_tile(bag, "a")
    assert taken is not None
    assert tile_bag_to_string(taken) == "AB"
    # Original bag is untouched
    assert tile_bag_to_string(bag) == "AAB"
    assert take_tile(bag, "C") is None
    assert take_tile(EMPTY_BAG, "A") is None
