"""Textbook RSA in an Academic Sense.

Provides the number-theoretic engine behind RSA (modular exponentiation, Miller-Rabin, large prime generation and the
Extended Euclidean Algorithm) together with raw RSA Encryption, Decryption, Signing, Verification, SHA-256
hash-then-sign and blind signatures. Nothing here is padded or constant-time: it demonstrates the mathematics only.

Typical usage example:

    e, d, n = generate_key_pair()
    c = encrypt(n, e, 42)
    m = decrypt(n, d, c)
    s = sign_sha256(n, d, b"Hi there!")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textrsa.arith import extended_gcd
from textrsa.arith import mod_inverse
from textrsa.arith import power
from textrsa.keygen import generate_key_pair
from textrsa.keygen import generate_large_prime
from textrsa.keygen import is_probably_prime
from textrsa.keygen import KeyPair
from textrsa.rsa import blind_mask
from textrsa.rsa import blind_unmask
from textrsa.rsa import decrypt
from textrsa.rsa import encrypt
from textrsa.rsa import generate_blinding_factor
from textrsa.rsa import RSAPrivKey
from textrsa.rsa import RSAPubKey
from textrsa.rsa import sign
from textrsa.rsa import sign_sha256
from textrsa.rsa import verify
from textrsa.rsa import verify_sha256

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "RSAPrivKey",
    "RSAPubKey",
    "power",
    "extended_gcd",
    "mod_inverse",
    "is_probably_prime",
    "generate_large_prime",
    "generate_key_pair",
    "encrypt",
    "decrypt",
    "sign",
    "verify",
    "sign_sha256",
    "verify_sha256",
    "blind_mask",
    "blind_unmask",
    "generate_blinding_factor",
]
