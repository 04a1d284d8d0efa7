#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the curves shipped with ecclab.

Curve parameters are fixed configuration constants,
loaded from the package data directory at import time:

* toy97: y^2 = x^3 + 2x + 3 (mod 97), G = (0, 10), n = 50,
  the didactical curve used by default everywhere in ecclab
* ec13_11 and ec23_31: even smaller prime order curves

They are far too small for any real use.
"""

import json
from os import path
from typing import Any, Dict, List, Sequence, Tuple, Union

from ecclab.curve_group import CurveGroup, mult_aff
from ecclab.exceptions import ECCLabValueError
from ecclab.point import INF, Affine, Identity

datadir = path.join(path.dirname(__file__), "data")


class Curve(CurveGroup):
    """Cyclic subgroup of the points of an elliptic curve over Fp.

    The subgroup is generated by G and its order n is asserted,
    not verified: use verify_order if needed.
    """

    def __init__(
        self,
        p: int,
        a: int,
        b: int,
        G: Union[Affine, Sequence[int]],
        n: int,
        check_validity: bool = True,
    ) -> None:

        super().__init__(p, a, b, check_validity)

        if isinstance(G, Identity):
            raise ECCLabValueError("INF point cannot be a generator")
        if len(G) != 2:
            raise ECCLabValueError("Generator must a be a sequence[int, int]")
        self._G = Affine(int(G[0]), int(G[1]))
        self._n = int(n)

        if check_validity:
            if not self.is_on_curve(self.G):
                raise ECCLabValueError("Generator is not on the curve")
            if self.n < 2:
                raise ECCLabValueError(f"invalid order: {self.n}")

    @property
    def G(self) -> Affine:
        return self._G

    @property
    def n(self) -> int:
        return self._n

    def _params(self) -> Tuple[Any, ...]:
        return self._p, self._a, self._b, self._G, self._n

    def __str__(self) -> str:
        result = super().__str__()
        result += f"\n x_G = {self.G.x}"
        result += f"\n y_G = {self.G.y}"
        result += f"\n n   = {self.n}"
        return result

    def __repr__(self) -> str:
        result = f"Curve({self.p}, {self._a}, {self._b}"
        result += f", ({self.G.x}, {self.G.y}), {self.n})"
        return result

    def verify_order(self) -> bool:
        """Return True if n*G is the point at infinity.

        It does not prove n to be the smallest such value.
        """
        return mult_aff(self.n, self.G, self) == INF


def json_from_curve(ec: Curve) -> Union[str, List[Any]]:
    "Return the name of a shipped curve, or its parameter list."

    for ec_name, curve in CURVES.items():
        if curve == ec:
            return ec_name
    return [ec.p, ec.a, ec.b, [ec.G.x, ec.G.y], ec.n]


def curve_from_json(data: Union[str, List[Any]]) -> Curve:
    if isinstance(data, str):
        if data not in CURVES:
            raise ECCLabValueError(f"unknown curve: {data}")
        return CURVES[data]
    return Curve(*data)


filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    _curve_params = json.load(file_)
CURVES: Dict[str, Curve] = {}
for ec_name, params in _curve_params.items():
    CURVES[ec_name] = Curve(*params)

toy97 = CURVES["toy97"]
