#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup,
for didactical (and fun) reason only,
e.g. to feed a plot of all the curve points.
"""

from typing import List

from ecclab.curve_group import CurveGroup
from ecclab.exceptions import ECCLabRuntimeError, ECCLabValueError
from ecclab.number_theory import mod_add, mod_mul, mod_pow
from ecclab.point import INF, Affine, Point

# O(p^2) brute force: keep it well below any real field size
MAX_P = 4096


def find_all_points(ec: CurveGroup) -> List[Point]:
    """Return all affine points of the curve, if p is low.

    Very unsofisticated walk-through approach,
    for didactical sake only:
    every (x, y) pair is tested against the curve equation.
    Points are in increasing (x, y) order; INF is not included.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise ECCLabValueError(err_msg)

    p = ec.p
    points: List[Point] = []
    for x in range(p):
        rhs = mod_add(mod_add(mod_pow(x, 3, p), mod_mul(ec.a, x, p), p), ec.b, p)
        for y in range(p):
            if mod_mul(y, y, p) == rhs:
                points.append(Affine(x, y))

    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Return all G-generated subgroup points, if p is low.

    The list starts with G and ends with INF.
    With invalid curve parameters (check_validity=False)
    the walk may never reach INF: an Error is raised instead.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise ECCLabValueError(err_msg)

    ec.require_on_curve(G)
    # at most two points for each x, plus INF
    max_order = 2 * ec.p + 1
    points: List[Point] = [G]
    while points[-1] != INF:
        if len(points) >= max_order:
            err_msg = f"G order not found within {max_order} points"
            raise ECCLabRuntimeError(err_msg)
        points.append(ec.add_aff(points[-1], G))

    return points


def group_order(ec: CurveGroup) -> int:
    "Return the number of group points, INF included."

    return len(find_all_points(ec)) + 1
