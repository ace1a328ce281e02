import pytest

from puzzlealgos.probability import new21_game, soup_servings


def test_new21_game_certain_when_cap_covers_everything():
    assert new21_game(10, 1, 10) == pytest.approx(1.0)


def test_new21_game_example():
    assert new21_game(6, 1, 10) == pytest.approx(0.6)


def test_new21_game_larger_example():
    assert new21_game(21, 17, 10) == pytest.approx(0.73278, abs=1e-5)


def test_new21_game_no_draws_needed():
    assert new21_game(5, 0, 3) == pytest.approx(1.0)


def test_new21_game_bounded_and_monotone_in_n():
    values = [new21_game(n, 10, 6) for n in range(10, 30)]
    assert all(0.0 <= v <= 1.0 + 1e-9 for v in values)
    assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))


def test_soup_servings_example():
    assert soup_servings(50) == pytest.approx(0.625)


def test_soup_servings_large_is_one():
    assert soup_servings(5001) == 1.0


def test_soup_servings_empty_is_half():
    assert soup_servings(0) == 0.5


def test_soup_servings_bounded():
    for n in (1, 25, 100, 400, 1000):
        assert 0.5 <= soup_servings(n) <= 1.0