#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve with generator G of order n.

The curve domain parameters (p, a, b, G, n) are the ones of SEC 1 v.2
section 3.1.1, without the cofactor h.
Only the generator is validated at construction time:
primality of p and the order n of G are trusted preconditions.
"""

from dataclasses import dataclass
from typing import Optional

from eclib import libsecp256k1
from eclib.alias import Integer
from eclib.curve_group import HEX_THRESHOLD, CurveGroup, mult_aff
from eclib.exceptions import EClibValueError, InvalidGeneratorError
from eclib.point import Point
from eclib.utils import hex_string, int_from_integer


@dataclass(frozen=True)
class Curve(CurveGroup):
    "Elliptic curve over Fp with generator G of order n."

    G: Point
    n: int

    def __post_init__(self) -> None:
        super().__post_init__()

        if self.is_infinite(self.G):
            raise InvalidGeneratorError("INF point cannot be a generator")
        if not self.is_on_curve(self.G):
            raise InvalidGeneratorError(f"generator is not on the curve: {self.G}")
        if self.n < 1:
            raise EClibValueError(f"non positive n: {self.n}")

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        return result

    def mult(self, m: Integer, Q: Optional[Point] = None) -> Point:
        """Return the scalar multiplication m*Q.

        Q defaults to the generator G.
        m is not reduced mod n and must be non-negative.
        """
        m = int_from_integer(m)
        return mult_aff(m, self.G if Q is None else Q, self)

    def base_mult(self, m: Integer) -> Point:
        "Return the scalar multiplication m*G."
        m = int_from_integer(m)
        if m > 0 and libsecp256k1.is_available() and libsecp256k1.is_secp256k1(self):
            return libsecp256k1.mult(m)
        return mult_aff(m, self.G, self)
