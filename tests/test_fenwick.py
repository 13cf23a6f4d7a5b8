import pytest
from hypothesis import given, strategies as st

from cpkit.fenwick import (
    FenwickTree,
    crayon_queries,
    greater_before_counts,
    salary_queries,
)


def test_empty_prefix_is_zero():
    tree = FenwickTree(5)
    tree.add(3, 7)
    assert tree.prefix_sum(0) == 0
    assert tree.prefix_sum(-4) == 0


def test_prefix_beyond_size_raises():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.prefix_sum(4)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        FenwickTree(-1)


def test_add_at_zero_is_ignored():
    tree = FenwickTree(4)
    tree.add(0, 10)
    tree.add(2, 5)
    assert tree.prefix_sum(4) == 5


def test_length_is_size():
    assert len(FenwickTree(9)) == 9


@given(
    st.integers(min_value=1, max_value=30).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(
                st.tuples(st.integers(1, n), st.integers(-50, 50)), max_size=40
            ),
        )
    )
)
def test_point_updates_match_plain_list(data):
    size, updates = data
    tree = FenwickTree(size)
    model = [0] * (size + 1)
    for index, value in updates:
        tree.add(index, value)
        model[index] += value
    for right in range(size + 1):
        assert tree.prefix_sum(right) == sum(model[: right + 1])
    for left in range(1, size + 1):
        for right in range(left, size + 1):
            assert tree.range_sum(left, right) == sum(model[left : right + 1])


@given(
    st.integers(min_value=1, max_value=20).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(
                st.tuples(st.integers(1, n), st.integers(1, n), st.integers(-9, 9)),
                max_size=20,
            ),
        )
    )
)
def test_range_add_point_reads(data):
    size, updates = data
    tree = FenwickTree(size)
    model = [0] * (size + 1)
    for a, b, value in updates:
        left, right = min(a, b), max(a, b)
        tree.range_add(left, right, value)
        for position in range(left, right + 1):
            model[position] += value
    for position in range(1, size + 1):
        assert tree.prefix_sum(position) == model[position]


def test_greater_before_descending_input():
    assert greater_before_counts([5, 4, 3, 2, 1], 5) == [0, 1, 2, 3, 4]


def test_greater_before_ascending_input():
    assert greater_before_counts([1, 2, 3, 4], 4) == [0, 0, 0, 0]


def test_greater_before_rejects_out_of_range():
    with pytest.raises(ValueError):
        greater_before_counts([1, 6], 5)


@given(st.lists(st.integers(1, 10), max_size=30))
def test_greater_before_bounds(values):
    counts = greater_before_counts(values, 10)
    assert len(counts) == len(values)
    for position, count in enumerate(counts):
        assert 0 <= count <= position


def test_salary_example():
    salaries = [3, 7, 2, 2, 5]
    queries = [("?", 2, 3), ("!", 3, 6), ("?", 2, 3)]
    assert salary_queries(salaries, queries) == [3, 2]


@given(st.lists(st.integers(1, 1000), min_size=1, max_size=20))
def test_salary_full_range_counts_everyone(salaries):
    queries = [("?", min(salaries), max(salaries)), ("!", 1, 5000), ("?", 1, 5000)]
    assert salary_queries(salaries, queries) == [len(salaries), len(salaries)]


def test_salary_unknown_kind_raises():
    with pytest.raises(ValueError):
        salary_queries([1], [("x", 1, 2)])


def test_salary_bad_employee_raises():
    with pytest.raises(IndexError):
        salary_queries([1, 2], [("!", 3, 4)])


def test_crayon_draw_cancel_query():
    operations = [
        ("D", 1, 5),
        ("D", 3, 8),
        ("Q", 4, 4),
        ("C", 1),
        ("Q", 4, 4),
        ("Q", 9, 10),
    ]
    assert crayon_queries(operations) == [2, 1, 0]


def test_crayon_cancel_unknown_is_ignored():
    operations = [("D", 1, 2), ("C", 7), ("Q", 1, 2)]
    assert crayon_queries(operations) == [1]


def test_crayon_unknown_kind_raises():
    with pytest.raises(ValueError):
        crayon_queries([("X", 1, 2)])


@given(st.lists(st.tuples(st.integers(0, 50), st.integers(0, 50)), max_size=15))
def test_crayon_wide_query_sees_every_segment(pairs):
    segments = [(min(a, b), max(a, b)) for a, b in pairs]
    operations = [("D", left, right) for left, right in segments]
    operations.append(("Q", -1, 51))
    assert crayon_queries(operations) == [len(segments)]