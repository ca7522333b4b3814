#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point arithmetic.

Point addition, doubling, and scalar multiplication
in affine coordinates, both for prime and binary curves.

Warning: these functions are not constant-time,
so they are vulnerable to timing attacks.

Input points are never checked to be on the curve:
use is_point_valid for that.
Whenever an algebraic step is undefined
(i.e. a division by a field element without inverse)
the result is the infinity point INF, no exception is raised.
"""

from ecprim.alias import INF, Integer, Point
from ecprim.curve import BinaryCurve, Curve, PrimeCurve
from ecprim.exceptions import ECPrimTypeError, ECPrimValueError
from ecprim.f2m import add_f2m, div_f2m, mod_f2m, mul_f2m, square_f2m
from ecprim.number_theory import div_mod
from ecprim.utils import int_from_integer


def _not_a_curve(ec: object) -> ECPrimTypeError:
    return ECPrimTypeError(f"not a curve: {type(ec).__name__}")


def _require_point(Q: Point) -> None:
    # tuple only: a list would never compare equal to a tuple point
    if not isinstance(Q, tuple) or len(Q) not in (0, 2):
        raise ECPrimTypeError("not a point")


def is_point_at_infinity(Q: Point) -> bool:
    "Return True if the point is the infinity point."
    return Q == INF


def negate(ec: Curve, Q: Point) -> Point:
    """Return the opposite point.

    The input point is not checked to be on the curve.
    """
    _require_point(Q)
    if Q == INF:
        return INF
    if isinstance(ec, PrimeCurve):
        return _negate_prime(ec, Q)
    if isinstance(ec, BinaryCurve):
        return _negate_binary(ec, Q)
    raise _not_a_curve(ec)


def _negate_prime(ec: PrimeCurve, Q: Point) -> Point:
    return Q[0], (ec.p - Q[1]) % ec.p


def _negate_binary(ec: BinaryCurve, Q: Point) -> Point:
    # y + x is the other root of the curve equation for the same x
    return Q[0], add_f2m(Q[0], Q[1])


def point_add(ec: Curve, Q1: Point, Q2: Point) -> Point:
    """Return the sum of two points.

    The input points are not checked to be on the curve.
    """

    _require_point(Q1)
    _require_point(Q2)
    if Q1 == INF:
        return Q2
    if Q2 == INF:
        return Q1
    # opposite points, also when doubling a point of order two
    if Q1 == negate(ec, Q2):
        return INF
    if Q1 == Q2:
        return point_double(ec, Q1)

    if isinstance(ec, PrimeCurve):
        return _add_prime(ec, Q1, Q2)
    if isinstance(ec, BinaryCurve):
        return _add_binary(ec, Q1, Q2)
    raise _not_a_curve(ec)


def _add_prime(ec: PrimeCurve, Q: Point, R: Point) -> Point:
    lam = div_mod(Q[1] - R[1], Q[0] - R[0], ec.p)
    if lam is None:
        return INF
    x = (lam * lam - Q[0] - R[0]) % ec.p
    y = (lam * (Q[0] - x) - Q[1]) % ec.p
    return x, y


def _add_binary(ec: BinaryCurve, Q: Point, R: Point) -> Point:
    fx = ec.fx
    lam = div_f2m(fx, add_f2m(Q[1], R[1]), add_f2m(Q[0], R[0]))
    if lam is None:
        return INF
    x = square_f2m(fx, lam) ^ lam ^ Q[0] ^ R[0] ^ ec.a
    y = mul_f2m(fx, lam, Q[0] ^ x) ^ x ^ Q[1]
    return x, y


def point_double(ec: Curve, Q: Point) -> Point:
    """Return the double of a point.

    The input point is not checked to be on the curve.
    """

    _require_point(Q)
    if Q == INF:
        return INF

    if isinstance(ec, PrimeCurve):
        return _double_prime(ec, Q)
    if isinstance(ec, BinaryCurve):
        return _double_binary(ec, Q)
    raise _not_a_curve(ec)


def _double_prime(ec: PrimeCurve, Q: Point) -> Point:
    # no inverse if y == 0: Q is a point of order two
    lam = div_mod(3 * Q[0] * Q[0] + ec.a, 2 * Q[1], ec.p)
    if lam is None:
        return INF
    x = (lam * lam - 2 * Q[0]) % ec.p
    y = (lam * (Q[0] - x) - Q[1]) % ec.p
    return x, y


def _double_binary(ec: BinaryCurve, Q: Point) -> Point:
    fx = ec.fx
    # the point of order two
    if Q[0] == 0:
        return INF
    y_over_x = div_f2m(fx, Q[1], Q[0])
    if y_over_x is None:
        return INF
    lam = Q[0] ^ y_over_x
    x = square_f2m(fx, lam) ^ lam ^ ec.a
    y = square_f2m(fx, Q[0]) ^ mul_f2m(fx, x, lam ^ 1)
    return x, y


def point_mul(ec: Curve, m: Integer, Q: Point) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time: the sequence of additions and doublings
    leaks the bit pattern of m.

    The m coefficient can be negative and it is not reduced
    (e.g. mod n for cyclic groups of order n).
    The input point is not checked to be on the curve.
    """

    m = int_from_integer(m)
    _require_point(Q)
    if Q == INF:
        return INF

    if m < 0:
        m = -m
        Q = negate(ec, Q)

    # R is the running result
    R = INF
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = point_add(ec, R, Q)
        # remove the bit just accounted for
        m >>= 1
        # the doubling part of 'double & add'
        if m > 0:
            Q = point_double(ec, Q)
    return R


def is_point_valid(ec: Curve, Q: Point) -> bool:
    """Return True if the point is on the curve.

    Beside the curve equation,
    the coordinates must be already reduced field elements.
    The infinity point is always on the curve.
    """

    _require_point(Q)
    if Q == INF:
        return True

    if isinstance(ec, PrimeCurve):
        return _is_valid_prime(ec, Q)
    if isinstance(ec, BinaryCurve):
        return _is_valid_binary(ec, Q)
    raise _not_a_curve(ec)


def _is_valid_prime(ec: PrimeCurve, Q: Point) -> bool:
    x, y = Q
    if not 0 <= x < ec.p:
        return False
    if not 0 <= y < ec.p:
        return False
    # y^2 = x^3 + a*x + b (mod p)
    return (y * y - ((x * x + ec.a) * x + ec.b)) % ec.p == 0


def _is_valid_binary(ec: BinaryCurve, Q: Point) -> bool:
    fx = ec.fx
    x, y = Q
    if x < 0 or mod_f2m(fx, x) != x:
        return False
    if y < 0 or mod_f2m(fx, y) != y:
        return False
    # y^2 + x*y = x^3 + a*x^2 + b
    lhs = square_f2m(fx, y) ^ mul_f2m(fx, x, y)
    rhs = mul_f2m(fx, square_f2m(fx, x), x ^ ec.a) ^ ec.b
    return lhs == rhs


def require_on_curve(ec: Curve, Q: Point) -> None:
    """Require the input curve Point to be on the curve.

    An Error is raised if not.
    """
    if not is_point_valid(ec, Q):
        raise ECPrimValueError("point not on curve")
