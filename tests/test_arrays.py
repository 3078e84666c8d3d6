import pytest

from dsalgo.arrays import BoundedArray, format_array, linear_search

SOURCE_ITEMS = [1, 3, 5, 7, 9]


def test_linear_search_finds_element():
    index = linear_search(SOURCE_ITEMS, 5)
    assert SOURCE_ITEMS[index] == 5


@pytest.mark.parametrize("value", SOURCE_ITEMS)
def test_linear_search_every_element(value):
    assert linear_search(SOURCE_ITEMS, value) == SOURCE_ITEMS.index(value)


def test_linear_search_missing_returns_minus_one():
    assert linear_search(SOURCE_ITEMS, 4) == -1


def test_linear_search_empty():
    assert linear_search([], 1) == -1


def test_linear_search_returns_first_occurrence():
    assert linear_search([4, 2, 4], 4) == 0


def test_append_adds_at_end():
    array = BoundedArray(10, SOURCE_ITEMS)
    array.append(11)
    assert list(array) == SOURCE_ITEMS + [11]
    assert len(array) == len(SOURCE_ITEMS) + 1


def test_append_to_full_array_raises():
    array = BoundedArray(2, [1, 2])
    with pytest.raises(OverflowError):
        array.append(3)
    assert list(array) == [1, 2]


def test_fill_up_to_capacity():
    array = BoundedArray(3)
    for value in (7, 8, 9):
        array.append(value)
    assert list(array) == [7, 8, 9]
    with pytest.raises(OverflowError):
        array.append(10)


def test_initial_items_over_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedArray(2, [1, 2, 3])


def test_format_array():
    assert format_array([1, 3, 5]) == "1 3 5"


def test_format_empty_array():
    assert format_array([]) == ""


def test_str_matches_format_array():
    array = BoundedArray(10, SOURCE_ITEMS)
    assert str(array) == format_array(SOURCE_ITEMS)