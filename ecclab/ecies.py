#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ECIES-like encryption scheme.

Encryption with ephemeral key k and recipient public key Q = d*G:

    C1 = k*G
    seed = x(k*Q) mod 2^32
    ciphertext = utf8(plaintext) XOR lcg_keystream(seed)

Decryption with private key d recomputes the same seed from d*C1,
as d*(k*G) = k*(d*G).
Only C1 and the ciphertext are transmitted, never k.

This is a didactical toy: no key derivation function,
no authentication tag, a non cryptographic keystream,
and a 32-bit seed over a 50-element group.
"""

import logging
from dataclasses import dataclass, field
from typing import Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from ecclab.alias import Integer, Octets, PointLike, String
from ecclab.codec import (
    bytes_from_hex,
    bytes_from_octets,
    bytes_from_text,
    hex_from_bytes,
    text_from_bytes,
)
from ecclab.curve import Curve, toy97
from ecclab.curve_group import mult_aff
from ecclab.dh import int_from_scalar, seed_from_point, shared_secret_point
from ecclab.keystream import lcg_keystream, xor_bytes
from ecclab.point import (
    Identity,
    Point,
    json_from_point,
    point_from_pointlike,
    point_from_text,
)

logger = logging.getLogger(__name__)

_EncryptedMessage = TypeVar("_EncryptedMessage", bound="EncryptedMessage")


@dataclass(frozen=True)
class EncryptedMessage(DataClassJsonMixin):
    # ephemeral public key k*G
    c1: Point = field(
        metadata=config(encoder=json_from_point, decoder=point_from_text)
    )
    ciphertext: bytes = field(
        default=b"",
        metadata=config(encoder=hex_from_bytes, decoder=bytes_from_hex),
    )

    @property
    def ciphertext_hex(self) -> str:
        return hex_from_bytes(self.ciphertext)

    @classmethod
    def from_ciphertext_hex(
        cls: Type[_EncryptedMessage], ciphertext_hex: str, c1: PointLike
    ) -> _EncryptedMessage:
        return cls(point_from_pointlike(c1), bytes_from_hex(ciphertext_hex))


def _keystream_from_shared_point(shared_point: Point, length: int) -> bytes:
    if isinstance(shared_point, Identity):
        logger.warning("shared secret point is INF: keystream seed is 0")
    return lcg_keystream(seed_from_point(shared_point), length)


def encrypt(
    plaintext: String,
    ephemeral_key: Integer,
    pub_key: PointLike,
    ec: Curve = toy97,
) -> EncryptedMessage:
    """Encrypt a message for the owner of pub_key.

    The ephemeral key k must be in 1..n-1
    and the recipient public key must be on the curve.
    """

    k = int_from_scalar(ephemeral_key, ec, "ephemeral key")
    shared_point = shared_secret_point(k, pub_key, ec)
    c1 = mult_aff(k, ec.G, ec)

    msg = bytes_from_text(plaintext)
    keystream = _keystream_from_shared_point(shared_point, len(msg))
    logger.debug("encrypting %d bytes", len(msg))
    return EncryptedMessage(c1, xor_bytes(msg, keystream))


def decrypt(
    ciphertext: Octets,
    c1: PointLike,
    prv_key: Integer,
    ec: Curve = toy97,
) -> str:
    """Decrypt a ciphertext with the recipient private key.

    The ciphertext is usually a hex-string (see ecclab.codec),
    C1 a Point or its 'x,y' text representation.
    C1 must be on the curve; the private key must be in 1..n-1.
    """

    d = int_from_scalar(prv_key, ec, "private key")
    shared_point = shared_secret_point(d, c1, ec)
    ct = bytes_from_octets(ciphertext)

    keystream = _keystream_from_shared_point(shared_point, len(ct))
    logger.debug("decrypting %d bytes", len(ct))
    return text_from_bytes(xor_bytes(ct, keystream))


def decrypt_message(
    message: EncryptedMessage, prv_key: Integer, ec: Curve = toy97
) -> str:
    return decrypt(message.ciphertext, message.c1, prv_key, ec)
