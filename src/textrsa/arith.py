"""Number-theoretic primitives underpinning every textbook RSA operation.

Provides modular exponentiation by repeated squaring, the Extended Euclidean Algorithm and the modular inverse derived
from it. Everything works on plain Python integers, so no fixed-width overflow is possible.

Typical usage example:

    power(4, 13, 497)
    g, x, y = extended_gcd(240, 46)
    d = mod_inverse(65537, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def power(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` via binary (square-and-multiply) exponentiation.

    Walks the bits of the exponent from least to most significant, multiplying the accumulator by the current square
    of the base on every set bit.

    Args:
        base: The base. Any integer, reduced modulo `modulus` up front.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        The residue in range [0, modulus-1].

    Raises:
        ValueError: If the modulus is below 1 or the exponent is negative.
    """
    if modulus < 1:
        raise ValueError("Modulus must be >= 1")
    if exponent < 0:
        raise ValueError("Exponent must be >= 0")
    base %= modulus
    result = 1 % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent //= 2
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b). Iterative, so arbitrarily large inputs never hit the recursion limit.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(a: int, m: int) -> int:
    """Computes the modular multiplicative inverse of `a` modulo `m`.

    Args:
        a: The number to invert.
        m: The modulus. Must be >= 1.

    Returns:
        The inverse in range [0, m-1], such that (a * inverse) % m == 1.

    Raises:
        ValueError: If `a` and `m` are not coprime, meaning no inverse exists.
    """
    if m < 1:
        raise ValueError("Modulus must be >= 1")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"No inverse exists: gcd(a, m) = {g}")
    return x % m
