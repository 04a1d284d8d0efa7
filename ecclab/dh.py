#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Implementation of the Diffie-Hellman key agreement scheme using
elliptic curve cryptography. A key agreement scheme is used
by two entities to establish shared keying data, which will be
later utilized e.g. in symmetric cryptographic scheme.

Both entities combine their own private scalar with the other
entity's public point: the scheme relies on k*(d*G) = d*(k*G).

The two entities must agree on the elliptic curve to use.

Warning: private keys are drawn from the 'random' module,
which is not a cryptographically secure source of randomness.
"""

import logging
import random
import re
from dataclasses import InitVar, dataclass, field
from typing import Optional

from dataclasses_json import DataClassJsonMixin, config

from ecclab.alias import Integer, PointLike
from ecclab.curve import Curve, curve_from_json, json_from_curve, toy97
from ecclab.curve_group import mult_aff
from ecclab.exceptions import (
    ECCLabRuntimeError,
    ECCLabTypeError,
    ECCLabValueError,
    ScalarOutOfRangeError,
)
from ecclab.point import Identity, Point, point_from_pointlike

logger = logging.getLogger(__name__)

SEED_MASK = 0xFFFFFFFF

# plain decimal digits, no underscores or non-ASCII digits
_DECIMAL_INT = re.compile("[+-]?[0-9]+")


def int_from_scalar(q: Integer, ec: Curve = toy97, name: str = "scalar") -> int:
    """Return a scalar as int, requiring it to be in 1..n-1.

    Plain decimal text strings are accepted; out-of-range values
    are rejected, never reduced mod n.
    """

    if isinstance(q, str):
        text = q.strip()
        if not _DECIMAL_INT.fullmatch(text):
            raise ECCLabValueError(f"invalid {name}: '{q}'")
        q = int(text, 10)
    elif isinstance(q, bool) or not isinstance(q, int):
        raise ECCLabTypeError(f"not an int {name}: {q!r}")

    if not 0 < q < ec.n:
        raise ScalarOutOfRangeError(f"{name} not in 1..n-1: {q}")
    return q


def gen_prv_key(ec: Curve = toy97, rng: Optional[random.Random] = None) -> int:
    """Return a private key, uniformly drawn in 1..n-1.

    A random.Random instance can be provided for reproducibility;
    otherwise the module-level random generator is used.
    Neither is suitable for real key generation.
    """

    randint = random.randint if rng is None else rng.randint
    return randint(1, ec.n - 1)


def pub_key_from_prv_key(prv_key: Integer, ec: Curve = toy97) -> Point:
    "Return the public key Q = d*G."

    d = int_from_scalar(prv_key, ec, "private key")
    return mult_aff(d, ec.G, ec)


def shared_secret_point(
    prv_key: Integer, pub_key: PointLike, ec: Curve = toy97
) -> Point:
    """Return the shared secret point d*Q.

    The sender computes it as k*Q (ephemeral key, recipient public key),
    the receiver as d*C1 (private key, ephemeral public key).
    The other entity's point is required to be on the curve.
    """

    d = int_from_scalar(prv_key, ec)
    Q = point_from_pointlike(pub_key)
    ec.require_on_curve(Q)
    return mult_aff(d, Q, ec)


def diffie_hellman(prv_key: Integer, pub_key: PointLike, ec: Curve = toy97) -> int:
    """Diffie-Hellman elliptic curve key agreement scheme.

    Return the shared secret field element,
    i.e. the x-coordinate of the shared secret point.
    """

    shared_point = shared_secret_point(prv_key, pub_key, ec)
    if isinstance(shared_point, Identity):
        raise ECCLabRuntimeError("invalid (INF) shared secret")
    return shared_point.x


def seed_from_point(Q: Point) -> int:
    """Return the 32-bit keystream seed from the point x-coordinate.

    INF silently maps to 0: callers must detect
    a shared secret point collapsing to INF by themselves.
    """

    if isinstance(Q, Identity):
        return 0
    return Q.x & SEED_MASK


@dataclass(frozen=True)
class KeyPair(DataClassJsonMixin):
    """Private/public key pair.

    Only the private key is stored:
    the public key is always recomputed from it.
    """

    prv_key: int
    ec: Curve = field(
        default=toy97,
        metadata=config(encoder=json_from_curve, decoder=curve_from_json),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        int_from_scalar(self.prv_key, self.ec, "private key")

    @property
    def pub_key(self) -> Point:
        return pub_key_from_prv_key(self.prv_key, self.ec)

    def shared_secret_point(self, pub_key: PointLike) -> Point:
        return shared_secret_point(self.prv_key, pub_key, self.ec)


def gen_keys(ec: Curve = toy97, rng: Optional[random.Random] = None) -> KeyPair:
    "Return a new random private/public key pair."

    key_pair = KeyPair(gen_prv_key(ec, rng), ec)
    logger.debug("generated key pair on %r", ec)
    return key_pair
