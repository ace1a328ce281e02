from functools import reduce
from operator import or_

import pytest

from puzzlealgos.arrays import (
    count_hill_valley,
    four_sum,
    max_area,
    maximum_unique_subarray,
    remove_duplicates,
    remove_element,
    search_insert,
    search_rotated,
    smallest_subarrays,
    subarray_bitwise_ors,
    total_fruit,
    zero_filled_subarray,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(x in it for x in small)


def test_count_hill_valley_example():
    assert count_hill_valley([2, 4, 1, 1, 6, 5]) == 3


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [5, 5, 5], [9, 7, 3], [1]])
def test_count_hill_valley_monotonic(nums):
    assert count_hill_valley(nums) == 0


@pytest.mark.parametrize("nums", [[2, 4, 1, 1, 6, 5], [6, 6, 5, 5, 4, 1], [1, 3, 1, 3, 1]])
def test_count_hill_valley_ignores_repeats(nums):
    doubled = [v for v in nums for _ in range(2)]
    assert count_hill_valley(doubled) == count_hill_valley(nums)


@pytest.mark.parametrize("nums", [[1, 1, 2], [0, 0, 1, 1, 1, 2, 2, 3, 3, 4], [], [7]])
def test_remove_duplicates(nums):
    original = list(nums)
    k = remove_duplicates(nums)
    assert k == len(nums)
    assert nums == sorted(set(original))


@pytest.mark.parametrize("nums, val", [([3, 2, 2, 3], 3), ([0, 1, 2, 2, 3, 0, 4, 2], 2), ([], 1), ([1], 5)])
def test_remove_element(nums, val):
    original = list(nums)
    k = remove_element(nums, val)
    assert k == len(nums) == len(original) - original.count(val)
    assert val not in nums
    assert _is_subsequence(nums, original)


@pytest.mark.parametrize("target", range(-1, 10))
def test_search_insert(target):
    nums = [1, 3, 5, 6, 8]
    idx = search_insert(nums, target)
    assert sorted(nums[:idx] + [target] + nums[idx:]) == nums[:idx] + [target] + nums[idx:]
    if target in nums:
        assert nums[idx] == target


def test_search_rotated_finds_all():
    base = [0, 1, 2, 4, 5, 6, 7]
    for k in range(len(base)):
        rotated = base[k:] + base[:k]
        for value in rotated:
            assert search_rotated(rotated, value) == rotated.index(value)
        assert search_rotated(rotated, 3) == -1
        assert search_rotated(rotated, 8) == -1


def test_search_rotated_empty():
    assert search_rotated([], 0) == -1


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@pytest.mark.parametrize("h, n", [(3, 5), (1, 2), (7, 10)])
def test_max_area_equal_heights(h, n):
    assert max_area([h] * n) == h * (n - 1)


def test_max_area_two_walls():
    assert max_area([4, 9]) == 4
    assert max_area([5]) == 0


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [10], [5, 3, 8]])
def test_maximum_unique_subarray_all_distinct(nums):
    assert maximum_unique_subarray(nums) == sum(nums)


def test_maximum_unique_subarray_all_same():
    assert maximum_unique_subarray([6, 6, 6, 6]) == 6


def test_maximum_unique_subarray_bounded():
    nums = [5, 2, 1, 2, 5, 2, 1, 2, 5]
    result = maximum_unique_subarray(nums)
    assert max(nums) <= result <= sum(set(nums))


def test_four_sum_repeated():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


@pytest.mark.parametrize("nums, target", [([1, 0, -1, 0, -2, 2], 0), ([1, 2, 3, 4, 5, 6, -1], 10), ([10**9] * 4, -(10**9))])
def test_four_sum_properties(nums, target):
    quads = four_sum(nums, target)
    assert len({tuple(q) for q in quads}) == len(quads)
    for quad in quads:
        assert sum(quad) == target
        assert quad == sorted(quad)
        remaining = list(nums)
        for v in quad:
            remaining.remove(v)


def test_zero_filled_subarray():
    assert zero_filled_subarray([0]) == 1
    assert zero_filled_subarray([2, 10, 2019]) == 0
    a, b = [0] * 4, [0] * 3
    assert zero_filled_subarray(a + [1] + b) == zero_filled_subarray(a) + zero_filled_subarray(b)


@pytest.mark.parametrize("nums", [[1, 0, 2, 1, 3], [1, 2], [0, 0, 0], [8, 1, 2, 12, 7, 6]])
def test_smallest_subarrays(nums):
    result = smallest_subarrays(nums)
    assert len(result) == len(nums)
    for i, length in enumerate(result):
        best = reduce(or_, nums[i:])
        assert length >= 1 and i + length <= len(nums)
        assert reduce(or_, nums[i : i + length]) == best
        if length > 1:
            assert reduce(or_, nums[i : i + length - 1]) != best


def test_subarray_bitwise_ors():
    assert subarray_bitwise_ors([0, 0, 0]) == 1
    assert subarray_bitwise_ors([5]) == 1
    powers = [1, 2, 4, 8, 16]
    n = len(powers)
    assert subarray_bitwise_ors(powers) == n * (n + 1) // 2


def test_total_fruit_example():
    assert total_fruit([1, 2, 3, 2, 2]) == 4


@pytest.mark.parametrize("fruits", [[1, 2, 1], [0, 1, 0, 1, 1], [3], []])
def test_total_fruit_two_types(fruits):
    assert total_fruit(fruits) == len(fruits)


def test_total_fruit_all_distinct():
    assert total_fruit([1, 2, 3, 4, 5]) == 2