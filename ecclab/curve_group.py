#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup class Curve,
with generator G and (claimed) order n,
see the ecclab.curve module.
"""

from typing import Any, Tuple

from ecclab.exceptions import (
    ECCLabTypeError,
    ECCLabValueError,
    PointNotOnCurveError,
)
from ecclab.number_theory import mod_inv
from ecclab.point import INF, Affine, Identity, Point


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.

    Parameter validation can be skipped (check_validity=False)
    to explore degenerate or adversarial parameters:
    the group law is then computed anyway, with meaningless results.
    """

    def __init__(self, p: int, a: int, b: int, check_validity: bool = True) -> None:
        self._p = int(p)
        self._a = int(a)
        self._b = int(b)
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        p, a, b = self._p, self._a, self._b

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECCLabValueError(f"p is not prime: {p}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ECCLabValueError(f"negative a: {a}")
        if p <= a:
            raise ECCLabValueError(f"p <= a: {p} <= {a}")
        if b < 0:
            raise ECCLabValueError(f"negative b: {b}")
        if p <= b:
            raise ECCLabValueError(f"p <= b: {p} <= {b}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise ECCLabValueError("zero discriminant")

    @property
    def p(self) -> int:
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def _params(self) -> Tuple[Any, ...]:
        return self.p, self._a, self._b

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return type(self) is type(other) and self._params() == other._params()

    def __hash__(self) -> int:
        return hash(self._params())

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {self.p}"
        result += f"\n a   = {self._a}"
        result += f"\n b   = {self._b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.p}, {self._a}, {self._b})"

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Identity):
            return INF
        if isinstance(Q, Affine):
            return Affine(Q.x, (self.p - Q.y) % self.p)
        raise ECCLabTypeError("not a point")

    # methods using _a, _b, p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if isinstance(R, Identity):
            return Q
        if isinstance(Q, Identity):
            return R

        # opposite points, including the doubling of a y=0 point
        if Q.x == R.x and (Q.y + R.y) % self.p == 0:
            return INF

        if Q == R:  # point doubling: tangent slope
            lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self.p)
        else:  # secant slope
            lam = (R.y - Q.y) * mod_inv(R.x - Q.x, self.p)
        x = (lam * lam - Q.x - R.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Affine(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve
        return self.add_aff(Q, Q)

    def y2(self, x: int) -> int:
        "Return the right-hand side of the curve equation, i.e. y^2."
        return ((x * x + self._a) * x + self._b) % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise PointNotOnCurveError(f"point not on curve: {Q}")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        INF is on the curve by convention;
        coordinates must be field elements, i.e. in 0..p-1.
        """
        if isinstance(Q, Identity):
            return True
        if not isinstance(Q, Affine):
            raise ECCLabTypeError("not a point")
        if not (0 <= Q.x < self.p and 0 <= Q.y < self.p):
            return False
        return self.y2(Q.x) == Q.y * Q.y % self.p


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses 'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time: the sequence of additions
    leaks the bit pattern of m.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECCLabValueError(f"negative m: {m}")

    R: Point = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.add_aff(R, Q)  # then add current Q
        Q = ec.double_aff(Q)  # double Q for next step
        m >>= 1  # remove the bit just accounted for
    return R
