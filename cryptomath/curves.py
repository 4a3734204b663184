#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves parameters.

* secp256k1, the Bitcoin curve, from SEC 2 v.2 2.4.1
  (https://www.secg.org/sec2-v2.pdf)
* ec223, the didactic y^2 = x^3 + 7 curve over F_223,
  whose (47, 71) point generates a subgroup of order 21
"""

from typing import Dict, Tuple

from cryptomath.curve import Curve
from cryptomath.curve_point import CurvePoint
from cryptomath.field_element import FieldElement

# name: (p, a, b, Gx, Gy)
_CURVE_PARAMS: Dict[str, Tuple[str, str, str, str, str]] = {
    "secp256k1": (
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
        "00",
        "07",
        "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
        "483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
    ),
    "ec223": ("0xdf", "0x00", "0x07", "0x2f", "0x47"),
}

CURVES: Dict[str, Curve] = {}
GENERATORS: Dict[str, CurvePoint] = {}
for name, (p, a, b, Gx, Gy) in _CURVE_PARAMS.items():
    CURVES[name] = Curve(FieldElement(a, p), FieldElement(b, p))
    GENERATORS[name] = CurvePoint.from_curve(
        FieldElement(Gx, p), FieldElement(Gy, p), CURVES[name]
    )

secp256k1 = CURVES["secp256k1"]
ec223 = CURVES["ec223"]
