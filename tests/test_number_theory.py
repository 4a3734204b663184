#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cryptomath.number_theory` module."

import pytest

from cryptomath.exceptions import DivisionByZeroError
from cryptomath.number_theory import is_probable_prime, mod_inv, mod_pow

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    223,
    9739,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    2 ** 521 - 1,
]


def test_is_probable_prime() -> None:
    for p in primes:
        assert is_probable_prime(p)
    for n in (-7, 0, 1, 4, 9, 15, 221, 2 ** 256):
        assert not is_probable_prime(n)
    # base-2 Fermat pseudoprime
    assert is_probable_prime(341)


def test_mod_inv() -> None:
    for p in primes:
        with pytest.raises(DivisionByZeroError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        with pytest.raises(DivisionByZeroError, match="No inverse for 0 mod"):
            mod_inv(p, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            inv = mod_inv(-a, p)
            assert -a * inv % p == 1


def test_mod_pow() -> None:
    for p in primes[:26]:
        for a in range(p):
            assert mod_pow(a, 0, p) == 1
            assert mod_pow(a, 5, p) == a ** 5 % p
        for a in range(1, p):
            for n in range(1, 10):
                assert mod_pow(a, -n, p) * mod_pow(a, n, p) % p == 1
                # normalized into an exponent in 0..p-2
                assert mod_pow(a, -n, p) == mod_pow(a, -n + (p - 1), p)

    # exact, where floating point would not be
    p = 2 ** 256 - 2 ** 32 - 977
    a = 0xDEADBEEF
    assert mod_pow(a, p - 1, p) == 1
    assert mod_pow(a, -1, p) == mod_inv(a, p)
