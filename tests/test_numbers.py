import pytest

from algoworks.numbers import (
    dp_max_sub_array,
    fibonacci,
    fibonacci_iterative,
    max_sub_array,
    my_atoi,
    reverse_int,
    water_volume,
)

FIB = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_water_volume_example():
    assert water_volume([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_water_volume_empty_and_flat():
    assert water_volume([]) == 0
    assert water_volume([3, 3, 3]) == 0


@pytest.mark.parametrize("n,expected", list(enumerate(FIB, start=1)))
def test_fibonacci(n, expected):
    assert fibonacci(n) == expected


@pytest.mark.parametrize("n,expected", list(enumerate(FIB, start=1)))
def test_fibonacci_iterative(n, expected):
    assert fibonacci_iterative(n) == expected


def test_fibonacci_zero():
    assert fibonacci(0) == 0
    assert fibonacci_iterative(0) == 0


def test_max_sub_array():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_dp_max_sub_array():
    assert dp_max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_sub_array_all_negative():
    assert max_sub_array([-3, -1, -2]) == -1
    assert dp_max_sub_array([-3, -1, -2]) == -1


def test_max_sub_array_empty():
    with pytest.raises(ValueError):
        max_sub_array([])
    assert dp_max_sub_array([]) == 0


def test_reverse_int():
    assert reverse_int(123) == 321
    assert reverse_int(0) == 0
    assert reverse_int(2147483648) == 0
    assert reverse_int(-2147483649) == 0


def test_reverse_int_negative():
    assert reverse_int(-120) == -21


def test_my_atoi():
    assert my_atoi("42") == 42
    assert my_atoi("   -42") == -42
    assert my_atoi("words and 987") == 0


def test_my_atoi_clamps():
    assert my_atoi("99999999999") == 2147483647
    assert my_atoi("-99999999999") == -2147483648
    assert my_atoi("+17abc") == 17
    assert my_atoi("   ") == 0