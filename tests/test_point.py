#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclab.point` module."

import copy

import pytest

from ecclab.exceptions import ECCLabTypeError, ECCLabValueError
from ecclab.point import (
    INF,
    Affine,
    Identity,
    json_from_point,
    point_from_pointlike,
    point_from_text,
    text_from_point,
)


def test_identity() -> None:
    assert Identity() is INF
    assert copy.deepcopy(INF) is INF
    assert INF == Identity()
    assert INF != Affine(0, 0)
    assert Affine(0, 0) != INF
    assert repr(INF) == "INF"
    assert len({INF, Identity()}) == 1


def test_affine() -> None:
    Q = Affine(0, 10)
    assert Q.x == 0
    assert Q.y == 10
    assert Q == Affine(0, 10)
    assert Q != Affine(0, 87)
    x, y = Q
    assert (x, y) == (0, 10)
    assert hash(Q) == hash(Affine(0, 10))


def test_text() -> None:
    assert text_from_point(Affine(88, 56)) == "88,56"
    assert text_from_point(INF) == "INF"

    assert point_from_text("88,56") == Affine(88, 56)
    assert point_from_text(" 88 , 56 ") == Affine(88, 56)
    assert point_from_text("INF") is INF
    assert point_from_text(" inf ") is INF

    for Q in (Affine(0, 10), Affine(96, 0), INF):
        assert point_from_text(text_from_point(Q)) == Q

    for text in ("", "88", "88,56,1", "x,56", "88;56", "0x58,56"):
        with pytest.raises(ECCLabValueError, match="invalid point text: "):
            point_from_text(text)

    with pytest.raises(ECCLabTypeError, match="not a point"):
        text_from_point((88, 56))  # type: ignore


def test_pointlike() -> None:
    Q = Affine(88, 56)
    assert point_from_pointlike(Q) is Q
    assert point_from_pointlike(INF) is INF
    assert point_from_pointlike("88,56") == Q

    with pytest.raises(ECCLabTypeError, match="not a point"):
        point_from_pointlike((88, 56))  # type: ignore
    with pytest.raises(ECCLabTypeError, match="not a point"):
        point_from_pointlike(None)  # type: ignore


def test_json() -> None:
    assert json_from_point(Affine(88, 56)) == "88,56"
    assert json_from_point([88, 56]) == "88,56"
    assert json_from_point(INF) == "INF"
