#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import Dict, List

from cryptomath.curve import Curve
from cryptomath.curve_point import CurvePoint
from cryptomath.exceptions import CryptoMathValueError, CurveMismatchError
from cryptomath.field_element import FieldElement

MAX_PRIME = 10000


def _require_low_prime(curve: Curve) -> None:
    if curve.prime > MAX_PRIME:
        err_msg = f"p is too big to count all group points: {curve.prime}"
        raise CryptoMathValueError(err_msg)


def find_all_points(curve: Curve) -> List[CurvePoint]:
    """Find all group points, if p is low.

    The point at infinity comes first,
    followed by the finite points sorted by (x, y).
    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    _require_low_prime(curve)

    p = curve.prime
    roots: Dict[int, List[int]] = {}
    for i in range(p):
        roots.setdefault(i * i % p, []).append(i)

    points: List[CurvePoint] = [CurvePoint.from_curve(None, None, curve)]
    for i in range(p):
        x = FieldElement(i, p)
        for j in roots.get(curve.y2(x).value, []):
            points.append(CurvePoint.from_curve(x, FieldElement(j, p), curve))

    return points


def find_subgroup_points(curve: Curve, G: CurvePoint) -> List[CurvePoint]:
    """Find all G-generated subgroup points, if p is low.

    Return [G, 2G, ..., INF], adding G over and over:
    the length of the list is the order of G.
    """
    _require_low_prime(curve)
    if G.curve != curve:
        raise CurveMismatchError(f"G is not on the curve {curve}")

    points: List[CurvePoint] = [G]
    while not points[-1].is_infinity:
        points.append(points[-1] + G)

    return points
