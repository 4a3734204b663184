#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

All exponentiations use the three-argument built-in pow,
i.e. exact square-and-multiply on Python arbitrary precision integers:
floating point would silently lose precision as soon as
the modulus exceeds the float mantissa.
"""

import functools

from cryptomath.exceptions import DivisionByZeroError
from cryptomath.utils import int_repr


@functools.lru_cache()
def is_probable_prime(p: int) -> bool:
    """Return True if p passes the base-2 Fermat primality test.

    The test is _probabilistic_: a few pseudoprimes (e.g. 341) pass it.
    That is good enough to spot a mistyped modulus.
    """

    if p == 2:
        return True
    if p < 2 or p % 2 == 0:
        return False
    return pow(2, p - 1, p) == 1


def mod_inv(a: int, p: int) -> int:
    """Return the inverse of a (mod p); p must be a prime.

    Based on Fermat's little theorem: a^(p-2) * a = a^(p-1) = 1 (mod p).
    """

    a %= p
    if a == 0:
        raise DivisionByZeroError(f"No inverse for 0 mod {int_repr(p)}")
    return pow(a, p - 2, p)


def mod_pow(a: int, n: int, p: int) -> int:
    """Return a^n (mod p); p must be a prime.

    A negative exponent is first reduced modulo p - 1,
    the order of the multiplicative group.
    """

    if n < 0:
        n %= p - 1
    return pow(a, n, p)
