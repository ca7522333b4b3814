#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve dataclasses.

The set of curve families is closed:

* PrimeCurve: short Weierstrass curve y^2 = x^3 + a*x + b
  with x, y, a, and b in Fp (p being a prime)
* BinaryCurve: y^2 + x*y = x^3 + a*x^2 + b
  with x, y, a, and b in GF(2^m) (fx being the reduction polynomial)

Curve is the tagged union of the two:
point arithmetic dispatches on it exhaustively,
see the ecprim.prim module.

Optionally, a curve also carries the named-curve data
(generator G, its order n, the cofactor h, and the name)
provided by the catalog, see the ecprim.curves module.

Curve parameters are checked according to SEC 1 v.2 3.1.1.2.1
and 3.1.2.2.1 (only the field-level checks: generator, order and
cofactor need point arithmetic and are checked by
ecprim.curves.assert_valid_curve).
"""

from dataclasses import InitVar, dataclass, field
from typing import Any, List, Optional, Sequence, Union

from dataclasses_json import DataClassJsonMixin, config

from ecprim.alias import Integer, Point
from ecprim.exceptions import ECPrimValueError
from ecprim.f2m import degree_f2m, is_irreducible, mod_f2m
from ecprim.utils import hex_string, int_from_integer, int_repr


def _encode_int(i: Optional[int]) -> Optional[str]:
    return None if i is None else hex_string(i)


def _decode_int(i: Optional[Integer]) -> Optional[int]:
    return None if i is None else int_from_integer(i)


def _encode_point(Q: Optional[Sequence[int]]) -> Optional[List[str]]:
    return None if Q is None else [hex_string(Q[0]), hex_string(Q[1])]


def _decode_point(Q: Optional[Sequence[Integer]]) -> Optional[Point]:
    if Q is None:
        return None
    if len(Q) != 2:
        raise ECPrimValueError("generator must be a sequence[int, int]")
    return int_from_integer(Q[0]), int_from_integer(Q[1])


def _int_field(**kwargs: Any) -> Any:
    return field(metadata=config(encoder=_encode_int, decoder=_decode_int), **kwargs)


def _encode_poly(fx: int) -> List[int]:
    "Return the exponents of the non-zero terms, highest first."
    return [i for i in reversed(range(fx.bit_length())) if (fx >> i) & 1]


def _decode_poly(fx: Union[Integer, Sequence[int]]) -> int:
    "Return the polynomial from its exponents or an Integer."
    if isinstance(fx, (list, tuple)):
        return sum(1 << i for i in set(fx))
    return int_from_integer(fx)  # type: ignore


@dataclass(frozen=True)
class PrimeCurve(DataClassJsonMixin):
    """Elliptic curve over Fp: y^2 = x^3 + a*x + b (mod p).

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.
    """

    p: int = _int_field()
    a: int = _int_field()
    b: int = _int_field()
    G: Optional[Point] = field(
        default=None,
        metadata=config(encoder=_encode_point, decoder=_decode_point),
    )
    n: Optional[int] = _int_field(default=None)
    h: Optional[int] = field(default=None)
    name: Optional[str] = field(default=None)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def q(self) -> int:
        "Return the number of field elements."
        return self.p

    def assert_valid(self) -> None:
        p = self.p

        # 1. check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECPrimValueError(f"p is not prime: {int_repr(p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if self.a < 0:
            raise ECPrimValueError(f"negative a: {self.a}")
        if p <= self.a:
            raise ECPrimValueError(f"p <= a: {int_repr(p)} <= {int_repr(self.a)}")
        if self.b < 0:
            raise ECPrimValueError(f"negative b: {self.b}")
        if p <= self.b:
            raise ECPrimValueError(f"p <= b: {int_repr(p)} <= {int_repr(self.b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * self.a * self.a * self.a + 27 * self.b * self.b
        if d % p == 0:
            raise ECPrimValueError("zero discriminant")

    def __str__(self) -> str:
        result = f"PrimeCurve {self.name}" if self.name else "PrimeCurve"
        result += f"\n p   = {int_repr(self.p)}"
        result += f"\n a   = {int_repr(self.a)}"
        result += f"\n b   = {int_repr(self.b)}"
        return result


@dataclass(frozen=True)
class BinaryCurve(DataClassJsonMixin):
    """Elliptic curve over GF(2^m): y^2 + x*y = x^3 + a*x^2 + b.

    GF(2^m) is defined by the irreducible reduction polynomial fx
    of degree m; b must be different from zero.
    """

    fx: int = field(metadata=config(encoder=_encode_poly, decoder=_decode_poly))
    a: int = _int_field()
    b: int = _int_field()
    G: Optional[Point] = field(
        default=None,
        metadata=config(encoder=_encode_point, decoder=_decode_point),
    )
    n: Optional[int] = _int_field(default=None)
    h: Optional[int] = field(default=None)
    name: Optional[str] = field(default=None)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def m(self) -> int:
        "Return the degree of the binary field extension."
        return degree_f2m(self.fx)

    @property
    def q(self) -> int:
        "Return the number of field elements."
        return 1 << self.m

    def assert_valid(self) -> None:
        # 1. check that fx is an irreducible polynomial of degree m
        if self.m < 1:
            raise ECPrimValueError(f"invalid reduction polynomial: {self.fx}")
        if not is_irreducible(self.fx):
            err_msg = "reducible polynomial: " + int_repr(self.fx)
            raise ECPrimValueError(err_msg)

        # 2. check that a and b are binary polynomials of degree at most m-1
        if self.a < 0 or mod_f2m(self.fx, self.a) != self.a:
            raise ECPrimValueError(f"a not in GF(2^{self.m}): {int_repr(self.a)}")
        if self.b < 0 or mod_f2m(self.fx, self.b) != self.b:
            raise ECPrimValueError(f"b not in GF(2^{self.m}): {int_repr(self.b)}")

        # 3. Check that b ≠ 0
        if self.b == 0:
            raise ECPrimValueError("zero b: singular curve")

    def __str__(self) -> str:
        result = f"BinaryCurve {self.name}" if self.name else "BinaryCurve"
        exponents = _encode_poly(self.fx)
        result += "\n fx  = " + " + ".join(
            "1" if i == 0 else "x" if i == 1 else f"x^{i}" for i in exponents
        )
        result += f"\n a   = {int_repr(self.a)}"
        result += f"\n b   = {int_repr(self.b)}"
        return result


Curve = Union[PrimeCurve, BinaryCurve]
