from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from leetalgo.greedy import candy, find_content_children, largest_number


@pytest.mark.parametrize(
    "ratings, expected", [([1, 0, 2], 5), ([1, 2, 2], 4), ([1, 3, 2, 2, 1], 7)]
)
def test_candy_source_cases(ratings, expected):
    assert candy(ratings) == expected


def test_candy_small_inputs():
    assert candy([]) == 0
    assert candy([42]) == 1


@given(st.integers(2, 30), st.integers(-5, 5))
def test_candy_equal_ratings_get_one_each(n, rating):
    assert candy([rating] * n) == n


@given(st.lists(st.integers(0, 10), max_size=30))
def test_candy_at_least_one_each(ratings):
    assert candy(ratings) >= len(ratings)


@given(st.lists(st.integers(0, 10), max_size=30))
def test_candy_symmetric_under_reversal(ratings):
    assert candy(ratings) == candy(list(reversed(ratings)))


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([10, 2], "210"),
        ([3, 30, 34, 5, 9], "9534330"),
        ([1], "1"),
        ([10], "10"),
        ([0, 0], "0"),
    ],
)
def test_largest_number_source_cases(nums, expected):
    assert largest_number(nums) == expected


@given(st.lists(st.integers(0, 1000), min_size=1, max_size=5))
def test_largest_number_beats_every_arrangement(nums):
    best = max(
        int("".join(str(n) for n in order)) for order in permutations(nums)
    )
    assert largest_number(nums) == str(best)


def test_find_content_children_source_cases():
    assert find_content_children([1, 2, 3], [1, 1]) == 1
    assert find_content_children([1, 2], [1, 2, 3]) == 2


def test_find_content_children_leaves_inputs_alone():
    g = [3, 1, 2]
    s = [2, 1]
    find_content_children(g, s)
    assert g == [3, 1, 2]
    assert s == [2, 1]


@given(
    st.lists(st.integers(1, 20), max_size=15),
    st.lists(st.integers(1, 20), max_size=15),
)
def test_find_content_children_bounded(g, s):
    result = find_content_children(g, s)
    assert 0 <= result <= min(len(g), len(s))


@given(
    st.lists(st.integers(1, 20), max_size=15),
    st.lists(st.integers(1, 20), max_size=15),
)
def test_find_content_children_big_cookies_satisfy_all(g, s):
    big = [100] * len(s)
    assert find_content_children(g, big) == min(len(g), len(s))