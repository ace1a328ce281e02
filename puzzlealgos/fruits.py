"""Fruit-collecting puzzles: basket placement, harvesting walks and grid paths."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from itertools import accumulate, chain


def num_of_unplaced_fruits(fruits: list[int], baskets: list[int]) -> int:
    """Place each fruit in the leftmost free basket that holds it; count the misses."""
    free = list(baskets)
    placed = 0
    for fruit in fruits:
        for index, capacity in enumerate(free):
            if capacity >= fruit:
                free[index] = 0
                placed += 1
                break
    return len(fruits) - placed


class _BasketTree:
    """Max segment tree over basket capacities; used baskets become -1."""

    def __init__(self, baskets: list[int]) -> None:
        self._size = len(baskets)
        self._tree = [-1] * (4 * self._size)
        self._build(0, 0, self._size - 1, baskets)

    def _build(self, node: int, lo: int, hi: int, baskets: list[int]) -> None:
        if lo == hi:
            self._tree[node] = baskets[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid, baskets)
        self._build(2 * node + 2, mid + 1, hi, baskets)
        self._tree[node] = max(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def place(self, fruit: int) -> bool:
        """Use the leftmost basket holding ``fruit``; return False if none does."""
        return self._place(0, 0, self._size - 1, fruit)

    def _place(self, node: int, lo: int, hi: int, fruit: int) -> bool:
        if self._tree[node] < fruit:
            return False
        if lo == hi:
            self._tree[node] = -1
            return True
        mid = (lo + hi) // 2
        left, right = 2 * node + 1, 2 * node + 2
        if self._tree[left] >= fruit:
            placed = self._place(left, lo, mid, fruit)
        else:
            placed = self._place(right, mid + 1, hi, fruit)
        self._tree[node] = max(self._tree[left], self._tree[right])
        return placed


def num_of_unplaced_fruits_fast(fruits: list[int], baskets: list[int]) -> int:
    """Same as :func:`num_of_unplaced_fruits`, in logarithmic time per fruit."""
    if not baskets:
        return len(fruits)
    tree = _BasketTree(baskets)
    return sum(1 for fruit in fruits if not tree.place(fruit))


def max_total_fruits(fruits: list[list[int]], start_pos: int, k: int) -> int:
    """Most fruit gathered walking at most ``k`` steps from ``start_pos``.

    ``fruits`` holds ``[position, amount]`` pairs sorted by position.
    """
    positions = [position for position, _ in fruits]
    prefix = [0, *accumulate(amount for _, amount in fruits)]

    def gathered(lo: int, hi: int) -> int:
        left = bisect_left(positions, lo)
        right = bisect_right(positions, hi)
        return prefix[right] - prefix[left] if left < right else 0

    best = 0
    for back in range(k // 2 + 1):
        remain = k - 2 * back
        best = max(
            best,
            gathered(start_pos - back, start_pos + remain),
            gathered(start_pos - remain, start_pos + back),
        )
    return best


def max_collected_fruits(fruits: list[list[int]]) -> int:
    """Most fruit three children collect walking from three corners to the last cell."""
    n = len(fruits)
    if n < 2:
        raise ValueError("the grid must be at least 2x2")
    result = sum(fruits[i][i] for i in range(n))

    best = [
        [0 if i != j and i + j < n - 1 else value for j, value in enumerate(row)]
        for i, row in enumerate(fruits)
    ]

    for i in range(1, n):
        for j in range(i + 1, n):
            best[i][j] += max(
                best[i - 1][j - 1],
                best[i - 1][j],
                best[i - 1][j + 1] if j + 1 < n else 0,
            )

    for j in range(1, n):
        for i in range(j + 1, n):
            best[i][j] += max(
                best[i - 1][j - 1],
                best[i][j - 1],
                best[i + 1][j - 1] if i + 1 < n else 0,
            )

    return result + best[n - 2][n - 1] + best[n - 1][n - 2]


def min_cost(basket1: list[int], basket2: list[int]) -> int:
    """Cheapest swapping that makes both baskets equal, or -1 if impossible."""
    balance = Counter(basket1)
    balance.subtract(basket2)
    smallest = min(chain(basket1, basket2), default=0)

    extras: list[int] = []
    for cost, count in balance.items():
        if count % 2:
            return -1
        extras.extend([cost] * (abs(count) // 2))
    extras.sort()
    return sum(min(cost, 2 * smallest) for cost in extras[: len(extras) // 2])