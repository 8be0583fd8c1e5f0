# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest

from textrsa import arith

power_cases = [
    (4, 13, 497, 445),
    (2, 10, 1000, 24),
    (3, 200, 50, pow(3, 200, 50)),
    (7, 1, 13, 7),
    (20, 1, 13, 7),
    (-3, 3, 7, 1),
    (123456789, 987654321, 2**61 - 1, pow(123456789, 987654321, 2**61 - 1)),
    (2**1000 + 7, 2**521 - 1, 2**607 - 1, pow(2**1000 + 7, 2**521 - 1, 2**607 - 1)),
]

gcd_cases = [
    (240, 46),
    (46, 240),
    (17, 5),
    (65537, 2**520 - 2),
    (0, 9),
    (9, 0),
    (2**607 - 1, 2**521 - 1),
    (2**4000 + 3, 3**2500),
]


def id_generator(param):
    if isinstance(param, int) and param > 1000000:
        return f"LargeInt-{param.bit_length()}bits"
    return str(param)


@pytest.mark.parametrize("base,exponent,modulus,expected", power_cases, ids=id_generator)
def test_power(base, exponent, modulus, expected):
    assert arith.power(base, exponent, modulus) == expected


@pytest.mark.parametrize("modulus", [2, 3, 10, 497, 2**127 - 1])
@pytest.mark.parametrize("base", [0, 1, 5, 2**200])
def test_power_zero_exponent(base, modulus):
    assert arith.power(base, 0, modulus) == 1


@pytest.mark.parametrize("exponent", [1, 2, 65537, 2**100])
@pytest.mark.parametrize("modulus", [2, 97, 2**127 - 1])
def test_power_zero_base(exponent, modulus):
    assert arith.power(0, exponent, modulus) == 0


@pytest.mark.parametrize("base,exponent", [(0, 0), (5, 0), (5, 3), (2**300, 17)])
def test_power_unit_modulus(base, exponent):
    assert arith.power(base, exponent, 1) == 0


def test_power_brute_force():
    for base in range(0, 12):
        for exponent in range(0, 12):
            for modulus in range(1, 20):
                acc = 1
                for _ in range(exponent):
                    acc *= base
                assert arith.power(base, exponent, modulus) == acc % modulus


@pytest.mark.parametrize("modulus", [0, -1, -497])
def test_power_validates_modulus(modulus):
    with pytest.raises(ValueError, match="Modulus must be >= 1"):
        arith.power(4, 13, modulus)


def test_power_validates_exponent():
    with pytest.raises(ValueError, match="Exponent must be >= 0"):
        arith.power(4, -1, 497)


@pytest.mark.parametrize("a,b", gcd_cases, ids=id_generator)
def test_extended_gcd_bezout(a, b):
    g, x, y = arith.extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a", [0, 1, 12, 2**521 - 1])
def test_extended_gcd_base_case(a):
    assert arith.extended_gcd(a, 0) == (a, 1, 0)


def test_extended_gcd_deep_descent():
    # Consecutive Fibonacci numbers force the longest possible descent.
    a, b = 1, 1
    for _ in range(5000):
        a, b = b, a + b
    g, x, y = arith.extended_gcd(b, a)
    assert g == 1
    assert b * x + a * y == 1


@pytest.mark.parametrize("a,m", [(3, 11), (10, 17), (65537, (2**521 - 2) * (2**607 - 2)), (2**607 - 1, 2**521 - 1),
                                 (17, 3120), (1, 2)],
                         ids=id_generator)
def test_mod_inverse(a, m):
    inv = arith.mod_inverse(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1
    assert inv == pow(a, -1, m)


def test_mod_inverse_normalises_negative_coefficient():
    # The raw Bezout coefficient for (3, 7) is negative.
    assert arith.extended_gcd(3, 7)[1] < 0
    assert arith.mod_inverse(3, 7) == 5


def test_mod_inverse_reduces_large_input():
    assert arith.mod_inverse(3 + 7 * 2**200, 7) == 5


@pytest.mark.parametrize("a,m", [(4, 8), (0, 7), (6, 9), (2**521 - 1, (2**521 - 1) * (2**607 - 1))], ids=id_generator)
def test_mod_inverse_fails_without_coprimality(a, m):
    with pytest.raises(ValueError, match="No inverse exists"):
        arith.mod_inverse(a, m)


def test_mod_inverse_validates_modulus():
    with pytest.raises(ValueError, match="Modulus must be >= 1"):
        arith.mod_inverse(3, 0)
