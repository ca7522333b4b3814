#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "dead beef"
# b"\xde\xad\xbe\xef"
#
# use ecprim.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates, both for prime and binary curves.
# For binary curves the coordinates are GF(2^m) elements,
# i.e. ints whose bits are the coefficients of a polynomial over GF(2).
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, ...]

# The infinity point carries no coordinates: it is the empty tuple.
# Being empty, it compares unequal to every (x, y) affine point,
# including those with a zero coordinate
# (e.g. order-two points (x, 0) on prime curves
# or (0, sqrt(b)) on binary curves).
# It can be checked with 'Q == INF'
INF: Point = ()
