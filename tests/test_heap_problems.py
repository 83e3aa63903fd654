import statistics

import pytest

from algokit.heap_problems import (
    kth_smallest,
    merge_k_sorted,
    running_medians,
    top_k_frequent,
)
from algokit.list_problems import build_list, list_values

SAMPLE = [7, 10, 4, 3, 19, 2, 14, 16, 4]


@pytest.mark.parametrize("k", range(1, len(SAMPLE) + 1))
def test_kth_smallest_matches_sorted_order(k):
    assert kth_smallest(SAMPLE, k) == sorted(SAMPLE)[k - 1]


def test_kth_smallest_past_end_gives_largest():
    assert kth_smallest(SAMPLE, len(SAMPLE) + 5) == max(SAMPLE)


def test_kth_smallest_errors():
    with pytest.raises(ValueError):
        kth_smallest(SAMPLE, 0)
    with pytest.raises(ValueError):
        kth_smallest([], 1)


@pytest.mark.parametrize(
    "values", [[5.0, 15.0, 1.0, 3.0], [5, 1, 10, 2, 8, 7], [1.5], [2, 2, 2]]
)
def test_running_medians_match_prefix_medians(values):
    expected = [statistics.median(values[: i + 1]) for i in range(len(values))]
    assert running_medians(values) == pytest.approx(expected)


def test_running_medians_empty():
    assert running_medians([]) == []


def test_merge_k_sorted():
    groups = [[1, 4, 5], [1, 3, 4], [2, 6], []]
    result = merge_k_sorted([build_list(g) for g in groups])
    assert list_values(result) == sorted(v for g in groups for v in g)


def test_merge_k_sorted_all_empty():
    assert merge_k_sorted([None, None]) is None
    assert merge_k_sorted([]) is None


def test_top_k_frequent():
    nums = [1, 1, 1, 2, 2, 3]
    result = top_k_frequent(nums, 2)
    assert set(result) == {1, 2}
    assert result[-1] == 1


def test_top_k_frequent_orders_least_frequent_first():
    nums = [4] * 5 + [6] * 3 + [8] * 1
    result = top_k_frequent(nums, 3)
    assert [nums.count(v) for v in result] == sorted(nums.count(v) for v in result)
    assert set(result) == set(nums)


def test_top_k_frequent_k_larger_than_distinct():
    assert sorted(top_k_frequent([9, 9, 8], 5)) == [8, 9]


def test_top_k_frequent_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1], -1)