"""Core Key Generation Utility, mainly focusing on the generation of random large primes.

This module is responsible for the textbook RSA key pair: the Miller-Rabin probable prime test, sampling of large
odd candidates from a secure random source and the derivation of the private exponent.

Typical usage example:

    is_probably_prime(7919, 20)
    p = generate_large_prime()
    pair = generate_key_pair()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import random
import secrets
from typing import Callable, NamedTuple

from textrsa import arith

PUBLIC_EXPONENT: int = 65537
PRIME_BYTES: int = 129
PRIME_ROUNDS: int = 20
WITNESS_CAP: int = 100000

logger = logging.getLogger(__name__)


class KeyPair(NamedTuple):
    """A textbook RSA key pair. The primes behind `n` are deliberately absent."""
    e: int
    d: int
    n: int


def is_probably_prime(n: int, rounds: int, rng: random.Random | None = None) -> bool:
    """Perform Miller-Rabin primality test.

    Every even number is rejected outright, 2 included. Witnesses are drawn from [2, min(n-1, WITNESS_CAP)], trading
    some rigor on huge `n` for speed.

    Args:
        n: Integer to be tested.
        rounds: Number of Miller-Rabin trials to perform.
        rng: Source of witnesses, anything exposing `randint(a, b)`. Defaults to `secrets.SystemRandom()`.

    Returns:
        True if `n` is probably prime, False if it is definitely composite.
    """
    if n < 2 or n % 2 == 0:
        return False
    if rng is None:
        rng = secrets.SystemRandom()
    r = 0
    d = n - 1
    while d % 2 == 0:
        r += 1
        d //= 2
    for _ in range(rounds):
        witness = rng.randint(2, min(n - 1, WITNESS_CAP))
        x = arith.power(witness, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(1, r):
            x = arith.power(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_large_prime(random_bytes: Callable[[int], bytes] = secrets.token_bytes,
                         rng: random.Random | None = None,
                         max_attempts: int | None = None) -> int:
    """Generate a probable prime of at least 1024 bits.

    Draws `PRIME_BYTES` random bytes, forces a non-zero leading byte and an odd trailing byte, and keeps the first
    candidate passing `PRIME_ROUNDS` Miller-Rabin trials.

    Args:
        random_bytes: Secure random source, returning the requested number of bytes.
        rng: Witness source forwarded to `is_probably_prime`.
        max_attempts: Optional cap on the number of candidates. Unbounded if not provided.

    Returns:
        A probable prime number.

    Raises:
        RuntimeError: If `max_attempts` candidates were drawn with no prime found.
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        buf = bytearray(random_bytes(PRIME_BYTES))
        if buf[0] == 0:
            buf[0] = 1
        if buf[-1] % 2 == 0:
            buf[-1] += 1
        candidate = int.from_bytes(buf, byteorder="big", signed=False)
        if is_probably_prime(candidate, PRIME_ROUNDS, rng):
            logger.debug("Found a %d-bit probable prime after %d candidates", candidate.bit_length(), attempts)
            return candidate
    raise RuntimeError(f"Drew {max_attempts} candidates with no prime found. Check system random number generator.")


def generate_key_pair(random_bytes: Callable[[int], bytes] = secrets.token_bytes,
                      rng: random.Random | None = None,
                      max_attempts: int | None = None) -> KeyPair:
    """Generates a textbook RSA key pair.

    Draws two independent large primes and derives the private exponent as the inverse of `PUBLIC_EXPONENT` modulo
    the totient. A prime pair that is equal, or whose totient shares a factor with the public exponent, is discarded
    and redrawn. The primes are dropped before returning.

    Args:
        random_bytes: Secure random source, passed on to `generate_large_prime`.
        rng: Witness source, passed on to `generate_large_prime`.
        max_attempts: Candidate cap for each prime, passed on to `generate_large_prime`.

    Returns:
        The (e, d, n) key pair.

    Raises:
        RuntimeError: If the derived exponents fail the (e * d) % phi == 1 self-check.
    """
    e = PUBLIC_EXPONENT
    while True:
        p = generate_large_prime(random_bytes, rng, max_attempts)
        q = generate_large_prime(random_bytes, rng, max_attempts)
        phi = (p - 1) * (q - 1)
        if p != q and math.gcd(e, phi) == 1:
            break
        logger.debug("Discarding unsuitable prime pair, redrawing")
    n = p * q
    d = arith.mod_inverse(e, phi)
    if (e * d) % phi != 1:
        raise RuntimeError("Key generation self-check failed: (e * d) % phi != 1")
    del p, q
    return KeyPair(e, d, n)
