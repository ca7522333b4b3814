#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecprim.curve` module."

import pytest

from ecprim.curve import BinaryCurve, PrimeCurve
from ecprim.exceptions import ECPrimValueError
from ecprim.utils import hex_string

# test curves: very low cardinality
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves = {"ec13_11": PrimeCurve(13, 7, 6, (1, 1), 11, 1)}
low_card_curves["ec13_19"] = PrimeCurve(13, 0, 2, (1, 9), 19, 1)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = PrimeCurve(17, 6, 8, (0, 12), 13, 2)
low_card_curves["ec17_23"] = PrimeCurve(17, 3, 5, (1, 14), 23, 1)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = PrimeCurve(19, 0, 2, (4, 16), 13, 2)
low_card_curves["ec19_23"] = PrimeCurve(19, 2, 9, (0, 16), 23, 1)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = PrimeCurve(23, 9, 7, (5, 4), 19, 1)
low_card_curves["ec23_31"] = PrimeCurve(23, 5, 1, (0, 1), 31, 1)

# y^2 + x*y = x^3 + (z^3 + z + 1)*x^2 + 1 over GF(2^4), z^4 + z + 1
ec2_4 = BinaryCurve(0b10011, 0b0011, 1)


def test_prime_curve() -> None:
    ec = PrimeCurve(13, 0, 2)
    assert ec.q == 13
    assert ec.G is None
    assert ec.n is None
    assert ec.h is None
    assert ec.name is None

    # frozen dataclass
    with pytest.raises(AttributeError):
        ec.p = 17  # type: ignore[misc]

    assert ec == PrimeCurve(13, 0, 2)
    assert ec != PrimeCurve(13, 0, 3)
    assert hash(ec) == hash(PrimeCurve(13, 0, 2))


def test_prime_curve_exceptions() -> None:
    # good curve
    PrimeCurve(13, 0, 2, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="p is not prime: "):
        PrimeCurve(15, 0, 2, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="p is not prime: "):
        PrimeCurve(2, 0, 1)

    with pytest.raises(ECPrimValueError, match="negative a: "):
        PrimeCurve(13, -1, 2, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="p <= a: "):
        PrimeCurve(13, 13, 2, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="negative b: "):
        PrimeCurve(13, 0, -2, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="p <= b: "):
        PrimeCurve(13, 0, 13, (1, 9), 19, 1)

    with pytest.raises(ECPrimValueError, match="zero discriminant"):
        PrimeCurve(11, 7, 7, (1, 9), 19, 1)

    # the checks can be skipped
    ec = PrimeCurve(11, 7, 7, check_validity=False)
    assert ec.b == 7


def test_binary_curve() -> None:
    assert ec2_4.m == 4
    assert ec2_4.q == 16
    assert ec2_4.G is None

    fx = (1 << 163) | (1 << 7) | (1 << 6) | (1 << 3) | 1
    ec = BinaryCurve(fx, 1, 1)
    assert ec.m == 163
    assert ec.q == 2**163


def test_binary_curve_exceptions() -> None:
    with pytest.raises(ECPrimValueError, match="invalid reduction polynomial: "):
        BinaryCurve(1, 1, 1)

    with pytest.raises(ECPrimValueError, match="invalid reduction polynomial: "):
        BinaryCurve(0, 1, 1)

    with pytest.raises(ECPrimValueError, match="reducible polynomial: "):
        BinaryCurve(0b10101, 1, 1)

    with pytest.raises(ECPrimValueError, match="a not in GF\\(2\\^4\\): "):
        BinaryCurve(0b10011, 0b10000, 1)

    with pytest.raises(ECPrimValueError, match="a not in GF\\(2\\^4\\): "):
        BinaryCurve(0b10011, -1, 1)

    with pytest.raises(ECPrimValueError, match="b not in GF\\(2\\^4\\): "):
        BinaryCurve(0b10011, 1, 0b100000)

    with pytest.raises(ECPrimValueError, match="zero b: singular curve"):
        BinaryCurve(0b10011, 1, 0)


def test_serialization() -> None:
    for ec in low_card_curves.values():
        ec_dict = ec.to_dict()
        assert ec_dict["p"] == hex_string(ec.p)
        assert ec == PrimeCurve.from_dict(ec_dict)

        ec_json = ec.to_json()
        assert ec == PrimeCurve.from_json(ec_json)

    ec = PrimeCurve(13, 7, 6, (1, 1), 11, 1, "ec13_11")
    ec_dict = ec.to_dict(encode_json=True)
    assert ec_dict["p"] == "0D"
    assert ec_dict["G"] == ["01", "01"]
    assert ec_dict["n"] == "0B"
    assert ec_dict["h"] == 1
    assert ec_dict["name"] == "ec13_11"
    assert ec == PrimeCurve.from_dict(ec_dict)

    ec_dict = ec2_4.to_dict(encode_json=True)
    assert ec_dict["fx"] == [4, 1, 0]
    assert ec_dict["a"] == "03"
    assert ec_dict["G"] is None
    assert ec2_4 == BinaryCurve.from_dict(ec_dict)

    # the reduction polynomial can also be an Integer
    ec_dict["fx"] = "0x13"
    assert ec2_4 == BinaryCurve.from_dict(ec_dict)

    ec_dict = {"p": "0x0d", "a": 0, "b": 2, "G": ["0x01", "0x09", "0x01"]}
    err_msg = "generator must be a sequence\\[int, int\\]"
    with pytest.raises(ECPrimValueError, match=err_msg):
        PrimeCurve.from_dict(ec_dict)


def test_str() -> None:
    ec = PrimeCurve(13, 7, 6, (1, 1), 11, 1, "ec13_11")
    assert str(ec) == "PrimeCurve ec13_11\n p   = 13\n a   = 7\n b   = 6"
    assert str(ec2_4) == "BinaryCurve\n fx  = x^4 + x + 1\n a   = 3\n b   = 1"
