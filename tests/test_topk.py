import pytest

from algoworks.topk import top_k

DATA = [1, 10, 230, 4, 99, 21, 334, 20, 60, 50]


def test_top_five_values():
    result = top_k(DATA, 5)
    assert sorted(result) == [50, 60, 99, 230, 334]


def test_first_element_is_smallest_kept():
    result = top_k(DATA, 5)
    assert result[0] == min(result)


def test_result_is_a_min_heap():
    result = top_k(DATA, 5)
    for index, value in enumerate(result):
        for child in (2 * index + 1, 2 * index + 2):
            if child < len(result):
                assert value <= result[child]


def test_kept_values_beat_every_dropped_value():
    result = top_k(DATA, 3)
    dropped = list(DATA)
    for value in result:
        dropped.remove(value)
    assert len(result) == 3
    assert min(result) >= max(dropped)


def test_fewer_values_than_k_returns_all():
    assert sorted(top_k([7, 3], 5)) == [3, 7]


def test_zero_k_returns_empty():
    assert top_k(DATA, 0) == []


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        top_k(DATA, -1)


def test_accepts_any_iterable():
    assert sorted(top_k(iter(DATA), 1)) == [334]