#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Text and hex-string conversion utilities.

Text is always UTF-8 encoded.
Decoding malformed UTF-8 does not fail:
invalid sequences are replaced by U+FFFD.

Hex-strings are encoded as two lowercase hex digits per byte,
without separators.
When decoding, any non-hex character is silently ignored,
so that "de ad:BE-ef" is equivalent to "deadbeef";
an odd number of hex digits left after that
raises MalformedHexError instead of truncating the last byte.
"""

import re

from ecclab.alias import Octets, String
from ecclab.exceptions import MalformedHexError

_NON_HEX_DIGITS = re.compile("[^0-9a-fA-F]")


def bytes_from_text(text: String) -> bytes:
    "Return the UTF-8 encoding of a text string; bytes go untouched."

    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def text_from_bytes(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def hex_from_bytes(data: bytes) -> str:
    return data.hex()


def bytes_from_hex(hex_str: str) -> bytes:
    """Return bytes from a hex-string, ignoring non-hex characters.

    An odd number of hex digits is an error.
    """

    digits = _NON_HEX_DIGITS.sub("", hex_str)
    if len(digits) % 2:
        err_msg = f"odd number of hex digits: {len(digits)}"
        raise MalformedHexError(err_msg)
    return bytes.fromhex(digits)


def bytes_from_octets(octets: Octets) -> bytes:
    """Return bytes from a hex-string.

    If the input is not a string, then it goes untouched.
    """

    if isinstance(octets, str):  # hex string
        return bytes_from_hex(octets)
    return bytes(octets)
