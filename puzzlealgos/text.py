"""String puzzles: runs, brackets and pair removal."""

from __future__ import annotations

from itertools import groupby

_CLOSERS = {")": "(", "]": "[", "}": "{"}


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(ch * min(sum(1 for _ in run), 2) for ch, run in groupby(s))


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif not stack or stack.pop() != _CLOSERS.get(ch):
            return False
    return not stack


def largest_good_integer(num: str) -> str:
    """Return the largest three-same-digit substring of ``num``, or an empty string."""
    best = max((a for a, b, c in zip(num, num[1:], num[2:]) if a == b == c), default="")
    return best * 3


def remove_pairs(s: str, pair: str) -> str:
    """Repeatedly remove the two-character ``pair`` from ``s`` and return what is left."""
    if len(pair) != 2:
        raise ValueError("pair must be exactly two characters")
    first, second = pair
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def maximum_gain(s: str, x: int, y: int) -> int:
    """Maximum score from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    high, low = ("ab", "ba") if x > y else ("ba", "ab")
    first = remove_pairs(s, high)
    score = (len(s) - len(first)) // 2 * max(x, y)
    second = remove_pairs(first, low)
    score += (len(first) - len(second)) // 2 * min(x, y)
    return score