#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""FieldElement dataclass.

Dataclass encapsulating an element of the prime field Fp,
i.e. a residue class modulo the prime p,
represented by its value in the interval [0, p-1].

Arithmetic operators (+, -, *, /, **, unary -) are closed
over the same prime and always return a new FieldElement:
operands from different fields are never silently coerced.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptomath.alias import Integer
from cryptomath.exceptions import InvalidElementError, MismatchedFieldError
from cryptomath.number_theory import mod_inv, mod_pow
from cryptomath.utils import int_from_integer, int_repr


@dataclass(frozen=True)
class FieldElement:
    value: int
    prime: int

    def __init__(self, value: Integer, prime: Integer) -> None:

        object.__setattr__(self, "value", int_from_integer(value))
        object.__setattr__(self, "prime", int_from_integer(prime))

        self.assert_valid()

    def assert_valid(self) -> None:
        if self.prime < 2:
            raise InvalidElementError(f"invalid prime: {self.prime}")
        if not 0 <= self.value < self.prime:
            err_msg = "value not in 0..prime-1: "
            err_msg += f"{int_repr(self.value)}, prime {int_repr(self.prime)}"
            raise InvalidElementError(err_msg)

    def __str__(self) -> str:
        return f"({self.value}, {self.prime})"

    def _require_same_field(self, other: FieldElement, operation: str) -> None:
        if self.prime != other.prime:
            err_msg = f"cannot {operation} elements of different fields: "
            err_msg += f"{int_repr(self.prime)} vs {int_repr(other.prime)}"
            raise MismatchedFieldError(err_msg)

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "add")
        return FieldElement((self.value + other.value) % self.prime, self.prime)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "subtract")
        # Python % is never negative for a positive modulus
        return FieldElement((self.value - other.value) % self.prime, self.prime)

    def __mul__(self, other: object) -> FieldElement:
        if isinstance(other, FieldElement):
            self._require_same_field(other, "multiply")
            return FieldElement(self.value * other.value % self.prime, self.prime)
        # scalar multiplication: any int, negative or not reduced
        if isinstance(other, int) and not isinstance(other, bool):
            return FieldElement(self.value * other % self.prime, self.prime)
        return NotImplemented

    def __rmul__(self, other: object) -> FieldElement:
        # only reached for int * FieldElement
        return self.__mul__(other)

    def __truediv__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other, "divide")
        return self * other.inverse()

    def __pow__(self, exponent: object) -> FieldElement:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return FieldElement(mod_pow(self.value, exponent, self.prime), self.prime)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value % self.prime, self.prime)

    def inverse(self) -> FieldElement:
        """Return the multiplicative inverse.

        DivisionByZeroError is raised for the zero element.
        """
        return FieldElement(mod_inv(self.value, self.prime), self.prime)
