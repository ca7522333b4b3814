#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves catalog.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* SEC 2 v.1 curves, removed from SEC 2 v.2 as insecure ones
  http://www.secg.org/SEC2-Ver-1.0.pdf
* Federal Information Processing Standards Publication 186-4
  (NIST) curves, available also by their NIST names (e.g. P-192, K-163)
  https://oag.ca.gov/sites/all/files/agweb/pdfs/erds1/fips_pub_07_2013.pdf

All catalog curves are checked when this module is imported.
"""

import json
from math import isqrt
from os import path
from typing import Dict

from ecprim.alias import INF
from ecprim.curve import BinaryCurve, Curve, PrimeCurve
from ecprim.exceptions import ECPrimValueError
from ecprim.prim import is_point_valid, point_mul
from ecprim.utils import int_repr


def assert_valid_curve(ec: Curve) -> None:
    """Check the named-curve data, i.e. generator, order, and cofactor.

    Parameters are checked according to SEC 1 v.2 3.1.1.2.1 (7-8)
    and 3.1.2.2.1 (6-7); field parameters are checked
    at curve construction time.
    """

    if ec.G is None or ec.n is None or ec.h is None:
        raise ECPrimValueError("missing generator, order, or cofactor")

    # check that G ≠ INF and that G is on the curve
    if ec.G == INF:
        raise ECPrimValueError("INF point cannot be a generator")
    if not is_point_valid(ec, ec.G):
        raise ECPrimValueError("Generator is not on the curve")

    # check that n is prime
    n = ec.n
    if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
        raise ECPrimValueError(f"n is not prime: {int_repr(n)}")

    # check that nG = INF
    if point_mul(ec, n, ec.G) != INF:
        raise ECPrimValueError(f"n is not the group order: {int_repr(n)}")

    # check the cofactor, holding Hasse theorem
    # (q + 1 - 2 sqrt(q) <= h * n <= q + 1 + 2 sqrt(q))
    exp_h = (ec.q + 1 + isqrt(4 * ec.q)) // n
    if ec.h != exp_h:
        raise ECPrimValueError(f"invalid h: {ec.h}, expected {exp_h}")


datadir = path.join(path.dirname(__file__), "data")

filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    _curves_params = json.load(file_)

CURVES: Dict[str, Curve] = {}
for _params in _curves_params["prime"]:
    CURVES[_params["name"]] = PrimeCurve.from_dict(_params)
for _params in _curves_params["binary"]:
    CURVES[_params["name"]] = BinaryCurve.from_dict(_params)
for _ec in CURVES.values():
    assert_valid_curve(_ec)

# NIST names for the curves included in FIPS PUB 186-4
ALIASES: Dict[str, str] = _curves_params["aliases"]


def get_curve(name: str) -> Curve:
    "Return a catalog curve by its SEC 2 or NIST name."

    name = ALIASES.get(name, name)
    try:
        return CURVES[name]
    except KeyError as e:
        raise ECPrimValueError(f"unknown curve: {name}") from e


secp192r1 = CURVES["secp192r1"]
secp256k1 = CURVES["secp256k1"]
sect163k1 = CURVES["sect163k1"]
