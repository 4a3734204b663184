#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The two base classes are only meant to discriminate between Exceptions
raised by cryptomath from those raised by other codebase.
The specialized classes tell apart the ways a field or curve
operation can fail.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the cryptomath versions are derived.
"""


class CryptoMathValueError(ValueError):
    pass


class CryptoMathTypeError(TypeError):
    pass


class InvalidElementError(CryptoMathValueError):
    "Field element value not in 0..prime-1."


class MismatchedFieldError(CryptoMathValueError):
    "Operands belong to fields of different primes."


class DivisionByZeroError(CryptoMathValueError, ZeroDivisionError):
    "Division by the zero field element."


class InvalidCoordinatePairError(CryptoMathValueError):
    "Only one of the two point coordinates has been provided."


class PointNotOnCurveError(CryptoMathValueError):
    "Coordinates do not satisfy the curve equation."


class CurveMismatchError(CryptoMathValueError):
    "Group law applied to points of different curves."
