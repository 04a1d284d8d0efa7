#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions over the prime field Fp.

The modulus p is always passed explicitly
and every result is normalized into the 0..p-1 range.

Only mod_pow and mod_inv assume p to be a prime:
the inverse is computed with Fermat's little theorem,
i.e. a^-1 = a^(p-2) (mod p).
"""

from ecclab.exceptions import ECCLabValueError


def mod_reduce(x: int, p: int) -> int:
    "Return x (mod p) in the 0..p-1 range, even for negative x."

    return x % p


def mod_add(x: int, y: int, p: int) -> int:
    return (x + y) % p


def mod_sub(x: int, y: int, p: int) -> int:
    return (x - y) % p


def mod_mul(x: int, y: int, p: int) -> int:
    return (x * y) % p


def mod_pow(base: int, exponent: int, p: int) -> int:
    """Return base^exponent (mod p).

    This implementation uses the 'square & multiply' algorithm,
    'right-to-left' binary decomposition of the exponent.
    """

    if exponent < 0:
        raise ECCLabValueError(f"negative exponent: {exponent}")

    result = 1 % p
    base %= p
    while exponent > 0:
        # if least significant bit is 1, then multiply
        if exponent & 1:
            result = result * base % p
        base = base * base % p
        exponent >>= 1
    return result


def mod_inv(x: int, p: int) -> int:
    """Return the inverse of x (mod p), p being a prime.

    Based on Fermat's little theorem: x^(p-1) = 1 (mod p),
    so x^(p-2) is the inverse of x.

    There is no check for x = 0 (mod p):
    in that case the returned value is 0, which is not an inverse.
    If p is not a prime the returned value is meaningless.
    """

    return mod_pow(x, p - 2, p)
