#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurvePoint dataclass and the elliptic curve group law.

A CurvePoint is either a finite point (x, y) on the curve
y^2 = x^3 + a*x + b over Fp, or the point at infinity INF
(both coordinates None), the identity element of the group.

Points are validated at construction and never mutated:
the group law (the + operator) always returns a new CurvePoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Type

from cryptomath.alias import OptionalElement
from cryptomath.curve import Curve
from cryptomath.exceptions import CurveMismatchError, InvalidCoordinatePairError
from cryptomath.field_element import FieldElement


@dataclass(frozen=True)
class CurvePoint:
    x: OptionalElement
    y: OptionalElement
    curve: Curve

    def __init__(
        self, x: OptionalElement, y: OptionalElement, a: FieldElement, b: FieldElement
    ) -> None:

        object.__setattr__(self, "curve", Curve(a, b))

        if (x is None) != (y is None):
            err_msg = "invalid x, y pair: provide both coordinates, "
            err_msg += "or none of them for the point at infinity"
            raise InvalidCoordinatePairError(err_msg)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

        if x is not None and y is not None:
            self.curve.require_on_curve(x, y)

    @classmethod
    def infinity(cls: Type[CurvePoint], a: FieldElement, b: FieldElement) -> CurvePoint:
        "Return the point at infinity of the y^2 = x^3 + a*x + b curve."
        return cls(None, None, a, b)

    @classmethod
    def from_curve(
        cls: Type[CurvePoint], x: OptionalElement, y: OptionalElement, curve: Curve
    ) -> CurvePoint:
        return cls(x, y, curve.a, curve.b)

    @property
    def a(self) -> FieldElement:
        return self.curve.a

    @property
    def b(self) -> FieldElement:
        return self.curve.b

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def __str__(self) -> str:
        x = "null" if self.x is None else str(self.x)
        y = "null" if self.y is None else str(self.y)
        return f"(X:{x}, Y:{y}, A:{self.a}, B:{self.b})"

    def __neg__(self) -> CurvePoint:
        if self.x is None or self.y is None:
            return self
        return CurvePoint.from_curve(self.x, -self.y, self.curve)

    def __add__(self, other: object) -> CurvePoint:
        """Return the sum of two points according to the group law.

        The points must be on the same curve.
        """

        if not isinstance(other, CurvePoint):
            return NotImplemented
        if self.curve != other.curve:
            raise CurveMismatchError(
                f"points are not on the same curve: {self.curve} vs {other.curve}"
            )

        # INF is the identity element
        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        x1, y1, x2, y2 = self.x, self.y, other.x, other.y

        if x1 == x2:
            # opposite points: vertical line
            if y1 != y2:
                return CurvePoint.infinity(self.a, self.b)
            # point doubling with horizontal tangent: vertical line again
            if y1.value == 0:
                return CurvePoint.infinity(self.a, self.b)
            lam = (3 * x1 ** 2 + self.a) / (2 * y1)
        else:
            lam = (y2 - y1) / (x2 - x1)

        x = lam ** 2 - x1 - x2
        y = lam * (x1 - x) - y1
        # membership is re-checked by the constructor
        return CurvePoint.from_curve(x, y, self.curve)
