#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and testing) reason only.
"""

from typing import Dict, List

from ecprim.alias import INF, Point
from ecprim.curve import BinaryCurve, Curve, PrimeCurve
from ecprim.exceptions import ECPrimTypeError, ECPrimValueError
from ecprim.f2m import mul_f2m, square_f2m
from ecprim.prim import point_add

MAX_PRIME_FIELD_SIZE = 10000
MAX_BINARY_FIELD_SIZE = 256


def _require_low_cardinality(ec: Curve, what: str) -> None:
    if isinstance(ec, PrimeCurve):
        max_size = MAX_PRIME_FIELD_SIZE
    elif isinstance(ec, BinaryCurve):
        max_size = MAX_BINARY_FIELD_SIZE
    else:
        raise ECPrimTypeError(f"not a curve: {type(ec).__name__}")
    if ec.q > max_size:
        err_msg = f"field is too big to count all {what} points: {ec.q}"
        raise ECPrimValueError(err_msg)


def find_all_points(ec: Curve) -> List[Point]:
    """Attempt to find all group points, if the field is small.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The infinity point comes first.
    """

    _require_low_cardinality(ec, "group")

    points: List[Point] = [INF]
    if isinstance(ec, PrimeCurve):
        # all square roots (mod p) at once
        roots: Dict[int, List[int]] = {}
        for y in range(ec.p):
            roots.setdefault(y * y % ec.p, []).append(y)
        for x in range(ec.p):
            y2 = ((x * x + ec.a) * x + ec.b) % ec.p
            points.extend((x, y) for y in roots.get(y2, []))
    else:
        fx = ec.fx
        squares = [square_f2m(fx, y) for y in range(ec.q)]
        for x in range(ec.q):
            rhs = mul_f2m(fx, square_f2m(fx, x), x ^ ec.a) ^ ec.b
            for y in range(ec.q):
                if squares[y] ^ mul_f2m(fx, x, y) == rhs:
                    points.append((x, y))

    return points


def find_subgroup_points(ec: Curve, G: Point) -> List[Point]:
    """Attempt to find all G-generated subgroup points, if the field is small.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The infinity point comes last.
    """

    _require_low_cardinality(ec, "subgroup")

    points: List[Point] = [G]
    while points[-1] != INF:
        Q = point_add(ec, points[-1], G)
        points.append(Q)

    return points
