"""Probability puzzles solved by dynamic programming."""

from __future__ import annotations

from functools import cache

_SERVES = ((100, 0), (75, 25), (50, 50), (25, 75))


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Chance of ending with at most ``n`` points when drawing until ``k`` or more."""
    probs = [0.0] * (n + 1)
    probs[0] = 1.0
    window = 1.0 if k > 0 else 0.0
    for score in range(1, n + 1):
        probs[score] = window / max_pts
        if score < k:
            window += probs[score]
        if 0 <= score - max_pts < k:
            window -= probs[score - max_pts]
    return sum(probs[k:])


def soup_servings(n: int) -> float:
    """Chance soup A empties first, plus half the chance both empty together."""
    if n > 5000:
        return 1.0

    @cache
    def chance(a: int, b: int) -> float:
        if a <= 0 and b <= 0:
            return 0.5
        if a <= 0:
            return 1.0
        if b <= 0:
            return 0.0
        return 0.25 * sum(chance(max(0, a - da), max(0, b - db)) for da, db in _SERVES)

    return chance(n, n)