#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclab.curve_group_f` module."

import pytest

from ecclab.curve import Curve, toy97
from ecclab.curve_group import CurveGroup
from ecclab.curve_group_f import find_all_points, find_subgroup_points, group_order
from ecclab.exceptions import (
    ECCLabRuntimeError,
    ECCLabValueError,
    PointNotOnCurveError,
)
from ecclab.point import INF, Affine
from tests.test_curve import low_card_curves


def test_find_all_points() -> None:
    points = find_all_points(toy97)
    assert len(points) == 99
    assert points[:6] == [
        Affine(0, 10),
        Affine(0, 87),
        Affine(1, 43),
        Affine(1, 54),
        Affine(3, 6),
        Affine(3, 91),
    ]
    assert INF not in points
    assert points == sorted(points)
    assert len(set(points)) == len(points)
    for Q in points:
        assert toy97.is_on_curve(Q)
    # all the y = 0 points are there, only once
    assert [Q for Q in points if Q.y == 0] == [
        Affine(30, 0),
        Affine(68, 0),
        Affine(96, 0),
    ]

    # deterministic and restartable
    assert find_all_points(toy97) == points
    # it works with any CurveGroup
    assert find_all_points(CurveGroup(97, 2, 3)) == points


def test_group_order() -> None:
    assert group_order(toy97) == 100
    for ec in low_card_curves.values():
        assert group_order(ec) == ec.n


def test_find_subgroup_points() -> None:
    points = find_subgroup_points(toy97, toy97.G)
    assert len(points) == toy97.n
    assert points[0] == toy97.G
    assert points[1] == Affine(65, 32)
    assert points[24] == Affine(30, 0)
    assert points[-1] == INF
    assert find_subgroup_points(toy97, INF) == [INF]

    for ec in low_card_curves.values():
        points = find_subgroup_points(ec, ec.G)
        assert len(points) == ec.n
        # prime order: G generates the whole group
        assert set(points[:-1]) == set(find_all_points(ec))

    with pytest.raises(PointNotOnCurveError, match="point not on curve: "):
        find_subgroup_points(toy97, Affine(0, 11))


def test_exceptions() -> None:
    ec = CurveGroup(10007, 497, 1768)

    err_msg = "p is too big to count all group points: "
    with pytest.raises(ECCLabValueError, match=err_msg):
        find_all_points(ec)

    err_msg = "p is too big to count all subgroup points: "
    with pytest.raises(ECCLabValueError, match=err_msg):
        G = Affine(2, 3265)
        find_subgroup_points(ec, G)


def test_subgroup_walk_on_invalid_curve() -> None:
    # p = 15 is not a prime: the group law is meaningless
    # and the walk from G never gets back to INF
    ec = Curve(15, 1, 1, (0, 1), 5, check_validity=False)
    err_msg = "G order not found within 31 points"
    with pytest.raises(ECCLabRuntimeError, match=err_msg):
        find_subgroup_points(ec, ec.G)
