import math
from itertools import permutations

import pytest

from puzzlealgos.backtracking import (
    combination_sum,
    judge_point_24,
    letter_combinations,
    permute,
)


def test_letter_combinations_example():
    assert letter_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_letter_combinations_single_key():
    assert letter_combinations("7") == list("pqrs")


def test_letter_combinations_empty_and_blank_keys():
    assert letter_combinations("") == []
    assert letter_combinations("21") == []


def test_letter_combinations_lengths_and_uniqueness():
    result = letter_combinations("79")
    assert all(len(word) == 2 for word in result)
    assert len(set(result)) == len(result) == len("pqrs") * len("wxyz")


def test_letter_combinations_rejects_non_digits():
    with pytest.raises(ValueError):
        letter_combinations("2a")


def test_combination_sum_invariants():
    candidates = [2, 3, 6, 7]
    result = combination_sum(candidates, 7)
    assert [7] in result
    for combo in result:
        assert sum(combo) == 7
        assert all(value in candidates for value in combo)
        assert combo == sorted(combo)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_unreachable():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_permute_covers_all_orderings():
    nums = [1, 2, 3, 4]
    result = permute(nums)
    assert len(result) == math.factorial(len(nums))
    assert sorted(result) == sorted(list(p) for p in permutations(nums))
    assert result[0] == nums


def test_permute_does_not_mutate_input():
    nums = [3, 1, 2]
    permute(nums)
    assert nums == [3, 1, 2]


def test_judge_point_24_possible():
    assert judge_point_24([4, 1, 8, 7]) is True


def test_judge_point_24_impossible():
    assert judge_point_24([1, 2, 1, 2]) is False


def test_judge_point_24_order_independent():
    cards = [3, 3, 8, 8]
    answers = {judge_point_24(list(p)) for p in permutations(cards)}
    assert len(answers) == 1