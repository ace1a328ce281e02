"""Array puzzles: searching, windows, pointers and bitwise tricks."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from itertools import groupby


def count_hill_valley(nums: list[int]) -> int:
    """Count hills and valleys, treating runs of equal values as one point."""
    values = [value for value, _ in groupby(nums)]
    return sum(
        1
        for a, b, c in zip(values, values[1:], values[2:])
        if a < b > c or a > b < c
    )


def remove_duplicates(nums: list[int]) -> int:
    """Remove consecutive duplicates from ``nums`` in place; return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_insert(nums: list[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def search_rotated(nums: list[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted list of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] <= target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def max_area(height: list[int]) -> int:
    """Largest water container formed by two of the given heights."""
    lo, hi = 0, len(height) - 1
    best = 0
    while lo < hi:
        best = max(best, (hi - lo) * min(height[lo], height[hi]))
        if height[lo] < height[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def maximum_unique_subarray(nums: list[int]) -> int:
    """Largest sum of a contiguous subarray whose elements are all distinct."""
    seen: set[int] = set()
    start = total = best = 0
    for value in nums:
        while value in seen:
            seen.remove(nums[start])
            total -= nums[start]
            start += 1
        seen.add(value)
        total += value
        best = max(best, total)
    return best


def four_sum(nums: list[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruplets from ``nums`` summing to ``target``."""
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            p, q = j + 1, n - 1
            while p < q:
                total = values[i] + values[j] + values[p] + values[q]
                if total < target:
                    p += 1
                elif total > target:
                    q -= 1
                else:
                    found.append([values[i], values[j], values[p], values[q]])
                    while p < q and values[p] == values[p + 1]:
                        p += 1
                    while p < q and values[q] == values[q - 1]:
                        q -= 1
                    p += 1
                    q -= 1
    return found


def zero_filled_subarray(nums: list[int]) -> int:
    """Number of contiguous subarrays made only of zeros."""
    runs = (sum(1 for _ in run) for value, run in groupby(nums) if value == 0)
    return sum(k * (k + 1) // 2 for k in runs)


def smallest_subarrays(nums: list[int]) -> list[int]:
    """For each start, the shortest subarray length reaching the maximal OR."""
    last_seen = [-1] * 32
    result = [0] * len(nums)
    for i, value in reversed(list(enumerate(nums))):
        end = i
        for bit in range(32):
            if value >> bit & 1:
                last_seen[bit] = i
            elif last_seen[bit] != -1:
                end = max(end, last_seen[bit])
        result[i] = end - i + 1
    return result


def subarray_bitwise_ors(arr: list[int]) -> int:
    """Number of distinct values of OR over all contiguous subarrays."""
    result: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {x | value for x in ending_here} | {value}
        result |= ending_here
    return len(result)


def total_fruit(fruits: list[int]) -> int:
    """Longest contiguous run containing at most two distinct values."""
    counts: Counter[int] = Counter()
    start = best = 0
    for end, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            left = fruits[start]
            counts[left] -= 1
            if not counts[left]:
                del counts[left]
            start += 1
        best = max(best, end - start + 1)
    return best