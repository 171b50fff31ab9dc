import pytest

from webchecks.ui_testing.framework.partitioning import split_into_parts


def test_ten_items_in_three_parts():
    parts = split_into_parts(list(range(10)), 3)
    assert [len(p) for p in parts] == [4, 4, 2]
    assert parts[0] == [0, 1, 2, 3]


def test_trailing_parts_may_be_empty():
    assert split_into_parts(["a", "b", "c", "d"], 3) == [["a", "b"], ["c", "d"], []]


def test_empty_input():
    assert split_into_parts([], 3) == [[], [], []]


@pytest.mark.parametrize("parts", range(1, 7))
@pytest.mark.parametrize("length", [0, 1, 2, 5, 10, 13])
def test_concatenation_restores_input(length, parts):
    items = [f"item-{i}" for i in range(length)]
    result = split_into_parts(items, parts)

    assert len(result) == parts
    assert [item for part in result for item in part] == items


def test_accepts_any_sequence():
    assert split_into_parts(("x", "y", "z"), 2) == [["x", "y"], ["z"]]


@pytest.mark.parametrize("parts", [0, -1])
def test_rejects_non_positive_parts(parts):
    with pytest.raises(ValueError):
        split_into_parts([1, 2, 3], parts)
