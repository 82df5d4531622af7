# tests/test_mathz.py

import random

import pytest

from calendrical.core import mathz


def test_divmod_euclid_remainder_is_non_negative():
    random.seed(7)
    for _ in range(2000):
        m = random.randint(-10**6, 10**6)
        n = random.choice([-1, 1]) * random.randint(1, 1000)
        q, r = mathz.divmod_euclid(m, n)
        assert m == q * n + r
        assert 0 <= r < abs(n)


def test_divmod_euclid_negative_divisor():
    assert mathz.divmod_euclid(7, -2) == (-3, 1)
    assert mathz.divmod_euclid(-7, -2) == (4, 1)
    assert mathz.divide(-7, 2) == -4
    assert mathz.modulo(-7, 2) == 1


def test_adjusted_divide_is_ceiling():
    assert mathz.adjusted_divide(7, 2) == 4
    assert mathz.adjusted_divide(8, 2) == 4
    assert mathz.adjusted_divide(-7, 2) == -3
    assert mathz.adjusted_divide(0, 5) == 0


@pytest.mark.parametrize("m, expected", [(1, 1), (7, 7), (14, 7), (15, 1), (0, 7), (-1, 6)])
def test_adjusted_modulo(m, expected):
    assert mathz.adjusted_modulo(m, 7) == expected


def test_augmented_divide_turns_offsets_into_one_based_pairs():
    # days of the year -> (month, day) for months of 30 days
    assert mathz.augmented_divide(0, 30) == (1, 1)
    assert mathz.augmented_divide(29, 30) == (1, 30)
    assert mathz.augmented_divide(30, 30) == (2, 1)
    assert mathz.augmented_divide(364, 30) == (13, 5)
