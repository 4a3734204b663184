#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve dataclass.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity.

A Curve is fully identified by its (a, b) coefficients:
points hold the Curve they belong to,
so that 'same curve' is a single equality check.
"""

from __future__ import annotations

from dataclasses import dataclass
from warnings import warn

from cryptomath.exceptions import MismatchedFieldError, PointNotOnCurveError
from cryptomath.field_element import FieldElement
from cryptomath.number_theory import is_probable_prime
from cryptomath.utils import int_repr


@dataclass(frozen=True)
class Curve:
    a: FieldElement
    b: FieldElement

    def __post_init__(self) -> None:
        if self.a.prime != self.b.prime:
            err_msg = "curve coefficients of different fields: "
            err_msg += f"{int_repr(self.a.prime)} vs {int_repr(self.b.prime)}"
            raise MismatchedFieldError(err_msg)

        # warnings only, not errors
        if not is_probable_prime(self.prime):
            warn(f"p is not prime: {int_repr(self.prime)}")
        # 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * self.a ** 3 + 27 * self.b ** 2).value == 0:
            warn("zero discriminant: singular curve")

    @property
    def prime(self) -> int:
        return self.a.prime

    def __str__(self) -> str:
        return f"y^2 = x^3 + {self.a.value}*x + {self.b.value} (mod {self.prime})"

    def y2(self, x: FieldElement) -> FieldElement:
        "Return the curve equation right-hand side x^3 + a*x + b."
        return x ** 3 + self.a * x + self.b

    def is_on_curve(self, x: FieldElement, y: FieldElement) -> bool:
        """Return True if (x, y) satisfies the curve equation.

        MismatchedFieldError is raised if the coordinates
        do not belong to the curve field.
        """
        return y ** 2 == self.y2(x)

    def require_on_curve(self, x: FieldElement, y: FieldElement) -> None:
        """Require (x, y) to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(x, y):
            raise PointNotOnCurveError(f"point ({x}, {y}) is not on the curve {self}")
