#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A Point is either an Affine point (x, y)
or the point at infinity INF, the neutral element of the group.
INF has no coordinates:
it is the only instance of the Identity class.

Points are also represented as text ("x,y") when exchanged
with users, and in JSON too ("INF" for INF).
"""

from typing import Any, NamedTuple, Optional, Union

from ecclab.exceptions import ECCLabTypeError, ECCLabValueError


class Affine(NamedTuple):
    "Elliptic curve point in affine coordinates."

    x: int
    y: int


class Identity:
    "The point at infinity, i.e. the neutral element of the group."

    _instance: Optional["Identity"] = None

    def __new__(cls) -> "Identity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Identity)

    def __hash__(self) -> int:
        return hash("INF")


INF = Identity()

Point = Union[Affine, Identity]


def text_from_point(Q: Point) -> str:
    "Return the 'x,y' text representation of a point ('INF' for INF)."

    if isinstance(Q, Identity):
        return "INF"
    if isinstance(Q, Affine):
        return f"{Q.x},{Q.y}"
    raise ECCLabTypeError("not a point")


def point_from_text(text: str) -> Point:
    """Return a Point from its 'x,y' text representation.

    Leading/trailing blanks are stripped, also around each coordinate.
    The point is not checked to be on any curve.
    """

    text = text.strip()
    if text.upper() == "INF":
        return INF
    coordinates = text.split(",")
    if len(coordinates) != 2:
        raise ECCLabValueError(f"invalid point text: '{text}'")
    try:
        return Affine(int(coordinates[0].strip()), int(coordinates[1].strip()))
    except ValueError as e:
        raise ECCLabValueError(f"invalid point text: '{text}'") from e


def point_from_pointlike(Q: Union[Point, str]) -> Point:
    "Return a Point from a Point or its text representation."

    if isinstance(Q, str):
        return point_from_text(Q)
    if isinstance(Q, (Affine, Identity)):
        return Q
    raise ECCLabTypeError("not a point")


def json_from_point(Q: Any) -> str:
    "Return the text representation of a point, to be used in JSON."

    # dataclasses_json hands over the affine point already converted to a list
    if isinstance(Q, Identity):
        return "INF"
    return f"{int(Q[0])},{int(Q[1])}"
