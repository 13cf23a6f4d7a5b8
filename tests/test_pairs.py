import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.pairs import sum_of_pair_differences


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 1, 3], 4),
        ([6, 6, 5, 5], 0),
        ([6, 6, 4, 4], -8),
    ],
)
def test_worked_examples(values, expected):
    assert sum_of_pair_differences(values) == expected


def test_empty_and_single():
    assert sum_of_pair_differences([]) == 0
    assert sum_of_pair_differences([42]) == 0


def test_neighbouring_values_cancel():
    assert sum_of_pair_differences([5, 6, 5, 6, 6, 5]) == 0


def test_two_far_values_give_their_difference():
    big = 10**18
    assert sum_of_pair_differences([0, big]) == big
    assert sum_of_pair_differences([big, 0]) == -big


def test_accepts_generator():
    assert sum_of_pair_differences(x for x in [6, 6, 4, 4]) == sum_of_pair_differences([6, 6, 4, 4])


@given(st.lists(st.integers(min_value=-10**12, max_value=10**12), max_size=40))
def test_reversal_negates(values):
    assert sum_of_pair_differences(values[::-1]) == -sum_of_pair_differences(values)


@given(
    st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40),
    st.integers(min_value=-10**6, max_value=10**6),
)
def test_shift_invariant(values, shift):
    shifted = [value + shift for value in values]
    assert sum_of_pair_differences(shifted) == sum_of_pair_differences(values)


@given(st.integers(min_value=-100, max_value=100), st.integers(min_value=0, max_value=30))
def test_constant_list_is_zero(value, count):
    assert sum_of_pair_differences([value] * count) == 0