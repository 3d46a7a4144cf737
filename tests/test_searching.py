import pytest

from dsalab.searching import binary_search

SORTED = [10, 20, 30, 40, 50, 60, 70]


@pytest.mark.parametrize("target", SORTED)
def test_finds_every_present_value(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [5, 15, 45, 75])
def test_absent_value_returns_none(target):
    assert binary_search(SORTED, target) is None


def test_empty_sequence():
    assert binary_search([], 1) is None


def test_single_element():
    assert binary_search([42], 42) == 0
    assert binary_search([42], 41) is None


def test_duplicates_return_a_matching_index():
    items = [1, 2, 2, 2, 3]
    index = binary_search(items, 2)
    assert items[index] == 2


def test_works_with_strings():
    words = ["apple", "banana", "cherry"]
    assert words[binary_search(words, "cherry")] == "cherry"