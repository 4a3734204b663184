#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cryptomath.utils` module."

import secrets

import pytest

from cryptomath.exceptions import CryptoMathTypeError, CryptoMathValueError
from cryptomath.utils import hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))

    for invalid in (True, 1.0, None):
        with pytest.raises(CryptoMathTypeError, match="not an integer: "):
            int_from_integer(invalid)  # type: ignore


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        hex_string(a_str)

    with pytest.raises(CryptoMathValueError, match="negative integer: "):
        hex_string(-1)


def test_int_repr() -> None:
    assert int_repr(223) == "223"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x01DEADBEEF00000000) == "'01 DEADBEEF 00000000'"
