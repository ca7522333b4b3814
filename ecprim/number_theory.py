#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field modular arithmetic functions.

Implementations originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* the inverse is an optional result (None if it does not exist)
  instead of raising an exception
"""

from typing import Optional, Tuple


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> Optional[int]:
    """Return the inverse of a (mod m), None if it does not exist.

    m does not have to be a prime:
    the inverse exists if and only if gcd(a, m) == 1.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    return None


def div_mod(y: int, x: int, m: int) -> Optional[int]:
    "Return y/x (mod m), None if x has no inverse (mod m)."

    i = mod_inv(x, m)
    if i is None:
        return None
    return y * i % m
