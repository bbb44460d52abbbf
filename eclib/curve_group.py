#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication.

Note that CurveGroup does not have a generator:
it is just the group law over the curve points.
For the curve class with generator G and its order n,
see the eclib.curve module.
"""

from dataclasses import dataclass

from eclib.exceptions import EClibValueError
from eclib.number_theory import mod_inv, mod_sqrt
from eclib.point import INF, Point
from eclib.utils import hex_string

HEX_THRESHOLD = 0xFFFFFFFF


@dataclass(frozen=True)
class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.

    The group is defined by the point addition group law.

    Primality of p is a precondition left to the caller:
    it is not checked.
    """

    p: int
    a: int
    b: int

    def __post_init__(self) -> None:
        if self.p < 2:
            raise EClibValueError(f"invalid field prime: {self.p}")

    @property
    def p_size(self) -> int:
        "Byte-length of the field prime."
        return (self.p.bit_length() + 7) // 8

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    @staticmethod
    def is_infinite(Q: Point) -> bool:
        "Return True if the point is the infinity point."
        return Q.x is None or Q.y is None

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if self.is_infinite(Q):
            return INF
        return Point(Q.x, (self.p - Q.y) % self.p)

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve (or INF).
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if self.is_infinite(Q):
            return R
        if self.is_infinite(R):
            return Q

        if Q.x % self.p == R.x % self.p:
            if Q.y % self.p == R.y % self.p:  # point doubling
                return self.double_aff(Q)
            # opposite points
            return INF

        lam = (Q.y - R.y) * mod_inv(Q.x - R.x, self.p)
        x = (lam * lam - Q.x - R.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if self.is_infinite(Q):
            return INF
        # a point with y = 0 is its own opposite
        if Q.y % self.p == 0:
            return INF

        lam = (3 * Q.x * Q.x + self.a) * mod_inv(2 * Q.y, self.p)
        x = (lam * lam - Q.x - Q.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self.a) * x + self.b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            err_msg = "x-coordinate not in 0..p-1: "
            err_msg += f"{hex_string(x)}" if x > HEX_THRESHOLD else f"{x}"
            raise EClibValueError(err_msg)
        y2 = self._y2(x)
        try:
            return mod_sqrt(y2, self.p)
        except EClibValueError as e:
            err_msg = "invalid x-coordinate: "
            err_msg += f"{hex_string(x)}" if x > HEX_THRESHOLD else f"{x}"
            raise EClibValueError(err_msg) from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return (self.p - root) % self.p if root % 2 else root

    def y_odd(self, x: int) -> int:
        """Return the odd affine y-coordinate associated to x.

        If the only root is zero, zero is returned anyway.
        """
        root = self.y(x)
        return root if root % 2 else (self.p - root) % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input Point to be on the curve or INF.

        An Error is raised if not.
        """
        if not self.is_infinite(Q) and not self.is_on_curve(Q):
            raise EClibValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        The infinity point has no coordinates
        satisfying the curve equation: False is returned.
        """
        if self.is_infinite(Q):
            return False
        return self._y2(Q.x) == Q.y * Q.y % self.p


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time.

    The input point is assumed to be on curve.
    The m coefficient is not reduced mod n.
    """

    if m < 0:
        raise EClibValueError(f"negative m: {hex(m)}")

    R = INF
    for i in range(m.bit_length()):
        if (m >> i) & 1:
            R = ec.add_aff(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double_aff(Q)
    return R
