"""Backtracking searches: phone letters, combination sums, permutations and 24."""

from __future__ import annotations

from itertools import permutations, product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_EPSILON = 0.1


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad could type for ``digits``."""
    if not digits:
        return []
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    return ["".join(letters) for letters in product(*(_KEYPAD[int(ch)] for ch in digits))]


def combination_sum(candidates: list[int], target: int) -> list[list[int]]:
    """All combinations of ``candidates`` (reusable) that sum to ``target``."""
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        if remaining < 0:
            return
        for index in range(start, len(candidates)):
            chosen.append(candidates[index])
            search(index, remaining - candidates[index])
            chosen.pop()

    search(0, target)
    return found


def permute(nums: list[int]) -> list[list[int]]:
    """All orderings of ``nums``, generated by successive swaps."""
    work = list(nums)
    found: list[list[int]] = []

    def search(position: int) -> None:
        if position == len(work):
            found.append(list(work))
            return
        for index in range(position, len(work)):
            work[position], work[index] = work[index], work[position]
            search(position + 1)
            work[position], work[index] = work[index], work[position]

    search(0)
    return found


def _reaches_24(values: tuple[float, ...]) -> bool:
    if len(values) == 1:
        return abs(values[0] - 24) <= _EPSILON
    for i, j in permutations(range(len(values)), 2):
        rest = tuple(v for k, v in enumerate(values) if k not in (i, j))
        a, b = values[i], values[j]
        outcomes = [a + b, a - b, b - a, a * b]
        if b != 0:
            outcomes.append(a / b)
        if a != 0:
            outcomes.append(b / a)
        if any(_reaches_24((*rest, outcome)) for outcome in outcomes):
            return True
    return False


def judge_point_24(cards: list[int]) -> bool:
    """Return True if the cards combine with + - * / into 24."""
    return _reaches_24(tuple(float(card) for card in cards))