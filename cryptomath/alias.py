#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from cryptomath.field_element import FieldElement

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# "DEADBEEF 00000000"
# b'\xde\xad\xbe\xef'
#
# use cryptomath.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Point coordinate: a FieldElement, or None for the point at infinity
OptionalElement = Optional["FieldElement"]
