"""Integer puzzles: powers, digits and counting."""

from __future__ import annotations

from itertools import groupby

MOD = 1_000_000_007


def maximum_69_number(num: int) -> int:
    """Turn the first digit 6 of ``num`` into a 9."""
    return int(str(num).replace("6", "9", 1))


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n >= 1 and n & (n - 1) == 0


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is a positive power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a positive power of four."""
    return is_power_of_two(n) and n.bit_length() % 2 == 1


def is_palindrome(x: int) -> bool:
    """Return True if the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def reordered_power_of_2(n: int) -> bool:
    """Return True if the digits of ``n`` can be reordered into a power of two."""
    digits = sorted(str(n))
    return any(sorted(str(1 << exp)) == digits for exp in range(30))


def my_pow(x: float, n: int) -> float:
    """Compute ``x`` to the integer power ``n`` by repeated squaring."""
    if n == 0:
        return 1.0
    if n < 0:
        if x == 0:
            raise ZeroDivisionError("zero cannot be raised to a negative power")
        x = 1 / x
        n = -n
    result = 1.0
    while n:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{sum(1 for _ in group)}{digit}" for digit, group in groupby(term))
    return term


def product_queries(n: int, queries: list[list[int]]) -> list[int]:
    """Answer range products over the powers of two that make up ``n``, modulo 1e9+7."""
    powers = [1 << bit for bit in range(32) if n >> bit & 1]
    answers = []
    for start, end in queries:
        if start < 0 or end >= len(powers):
            raise IndexError(f"query [{start}, {end}] out of range for {len(powers)} powers")
        product = 1
        for power in powers[start : end + 1]:
            product = product * power % MOD
        answers.append(product)
    return answers


def number_of_ways(n: int, x: int) -> int:
    """Count ways to write ``n`` as a sum of ``x``-th powers of distinct positive integers."""
    if n < 0:
        return 0
    ways = [1] + [0] * n
    base = 1
    while base**x <= n:
        power = base**x
        for total in range(n, power - 1, -1):
            ways[total] = (ways[total] + ways[total - power]) % MOD
        base += 1
    return ways[n]