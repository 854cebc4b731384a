import pytest

from cbasics.search import binary_search, interpolation_search, linear_search

SORTED = [1, 2, 3, 4, 5, 6]
EVENS = [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]
UNSORTED = [10, 25, 7, 18, 42, 15]


def test_binary_search_source_example():
    assert binary_search(SORTED, 4) == SORTED.index(4)


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [0, 7, -3])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_interpolation_search_source_example():
    assert interpolation_search(EVENS, 12) == EVENS.index(12)


@pytest.mark.parametrize("target", EVENS)
def test_interpolation_search_finds_every_element(target):
    assert interpolation_search(EVENS, target) == EVENS.index(target)


@pytest.mark.parametrize("target", [1, 3, 21, 0, 13])
def test_interpolation_search_missing(target):
    assert interpolation_search(EVENS, target) is None


def test_interpolation_search_non_uniform():
    values = [1, 2, 3, 50, 100, 1000, 5000]
    for target in values:
        assert values[interpolation_search(values, target)] == target


def test_interpolation_search_all_equal():
    values = [7, 7, 7, 7]
    assert values[interpolation_search(values, 7)] == 7
    assert interpolation_search(values, 8) is None


def test_interpolation_search_empty():
    assert interpolation_search([], 5) is None


def test_linear_search_source_example():
    assert linear_search(UNSORTED, 15) == UNSORTED.index(15)


def test_linear_search_first_occurrence():
    values = [3, 9, 3, 9]
    assert linear_search(values, 9) == values.index(9)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 99) is None