#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Keystream generation and XOR stream cipher.

The keystream is produced by a 32-bit linear congruential generator
(the 'Numerical Recipes' one) seeded with the shared secret:

    state = (state * 1664525 + 1013904223) mod 2^32

each step emitting the low 8 bits of the new state.

It is deterministic and restartable,
but it is NOT a cryptographically secure keystream:
a few output bytes are enough to recover the whole state.
"""

from ecclab.exceptions import ECCLabValueError

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
UINT32_MASK = 0xFFFFFFFF


def lcg_keystream(seed: int, length: int) -> bytes:
    "Return length bytes of keystream from a 32-bit seed."

    if length < 0:
        raise ECCLabValueError(f"negative keystream length: {length}")

    state = seed & UINT32_MASK
    out = bytearray(length)
    for i in range(length):
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & UINT32_MASK
        out[i] = state & 0xFF
    return bytes(out)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    "Return the byte-wise XOR of two equal-length byte sequences."

    if len(a) != len(b):
        err_msg = f"length mismatch: {len(a)} vs {len(b)} bytes"
        raise ECCLabValueError(err_msg)
    return bytes(x ^ y for x, y in zip(a, b))
