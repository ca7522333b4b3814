#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Binary field GF(2^m) arithmetic functions.

A GF(2^m) element is a non-negative int whose bits are
the coefficients of a polynomial over GF(2) of degree less than m,
e.g. 0b1011 is x^3 + x + 1.

The field is defined by the reduction polynomial fx,
an irreducible polynomial of degree m encoded in the same way,
e.g. x^163 + x^7 + x^6 + x^3 + 1 is
(1 << 163) | (1 << 7) | (1 << 6) | (1 << 3) | 1.

Division and inversion return None, instead of raising,
when the divisor is the field zero.

See Hankerson, Menezes, Vanstone,
"Guide to Elliptic Curve Cryptography", chapter 2.3.
"""

from typing import List, Optional

from ecprim.exceptions import ECPrimValueError


def degree_f2m(x: int) -> int:
    "Return the degree of the polynomial x (-1 for the zero polynomial)."
    return x.bit_length() - 1


def add_f2m(x: int, y: int) -> int:
    "Return x + y, which is also x - y."
    return x ^ y


def mod_f2m(fx: int, x: int) -> int:
    "Return x reduced modulo fx."

    if fx < 1:
        raise ECPrimValueError(f"invalid reduction polynomial: {fx}")
    if x < 0:
        raise ECPrimValueError(f"negative polynomial: {x}")

    lf = fx.bit_length()
    lx = x.bit_length()
    while lx >= lf:
        x ^= fx << (lx - lf)
        lx = x.bit_length()
    return x


def mul_f2m(fx: int, x: int, y: int) -> int:
    """Return x * y reduced modulo fx.

    Right-to-left shift-and-add,
    with the running multiple of x kept reduced at each step.
    """

    m = degree_f2m(fx)
    x = mod_f2m(fx, x)
    y = mod_f2m(fx, y)
    result = 0
    while y:
        if y & 1:
            result ^= x
        y >>= 1
        x <<= 1
        if (x >> m) & 1:
            x ^= fx
    return result


def square_f2m(fx: int, x: int) -> int:
    """Return x^2 reduced modulo fx.

    Squaring is linear over GF(2): it just interleaves zero bits.
    """

    x = mod_f2m(fx, x)
    result = 0
    i = 0
    while x:
        if x & 1:
            result |= 1 << (2 * i)
        x >>= 1
        i += 1
    return mod_f2m(fx, result)


def inv_f2m(fx: int, x: int) -> Optional[int]:
    """Return the inverse of x modulo fx, None if it does not exist.

    It is based on the Extended Euclidean Algorithm for polynomials
    (Algorithm 2.48 in Guide to Elliptic Curve Cryptography).
    The inverse does not exist for the field zero
    or, if fx is reducible, when x and fx have a common factor.
    """

    u, v = mod_f2m(fx, x), fx
    # g1 * x = u and g2 * x = v (mod fx)
    g1, g2 = 1, 0
    while u > 1:
        j = u.bit_length() - v.bit_length()
        if j < 0:
            u, v = v, u
            g1, g2 = g2, g1
            j = -j
        u ^= v << j
        g1 ^= g2 << j
    # u == 0: gcd(x, fx) is v, which is not 1
    if u == 0:
        return None
    return mod_f2m(fx, g1)


def div_f2m(fx: int, x: int, y: int) -> Optional[int]:
    "Return x / y modulo fx, None if y has no inverse."

    i = inv_f2m(fx, y)
    if i is None:
        return None
    return mul_f2m(fx, x, i)


def _prime_factors(m: int) -> List[int]:
    factors: List[int] = []
    q = 2
    while q * q <= m:
        if m % q == 0:
            factors.append(q)
            while m % q == 0:
                m //= q
        q += 1
    if m > 1:
        factors.append(m)
    return factors


def _gcd_f2m(x: int, y: int) -> int:
    while y:
        x, y = y, mod_f2m(y, x)
    return x


def is_irreducible(fx: int) -> bool:
    """Return True if the polynomial fx is irreducible over GF(2).

    Rabin's irreducibility test: fx of degree m is irreducible
    if and only if x^(2^m) = x (mod fx) and,
    for each prime divisor q of m,
    gcd(x^(2^(m/q)) - x, fx) = 1.
    """

    m = degree_f2m(fx)
    if m < 1:
        return False

    x = mod_f2m(fx, 0b10)
    for q in _prime_factors(m):
        t = x
        for _ in range(m // q):
            t = square_f2m(fx, t)
        if _gcd_f2m(fx, add_f2m(t, x)) != 1:
            return False

    t = x
    for _ in range(m):
        t = square_f2m(fx, t)
    return t == x
