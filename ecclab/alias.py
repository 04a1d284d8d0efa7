#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

from ecclab.point import Point

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are decoded by ecclab.codec.bytes_from_hex,
# which ignores any non-hex character, e.g.:
# "deadbeef"
# "de ad be ef"
# "DE:AD:BE:EF"
#
# use ecclab.codec.bytes_from_octets to convert Octets to bytes
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# text strings are UTF-8 encoded, e.g. a message to be encrypted
#    if isinstance(msg, str):
#        msg = msg.encode("utf-8")
String = Union[bytes, str]

# scalar as int or as decimal text string, e.g. 7 or " 7 "
#
# use ecclab.dh.int_from_scalar to convert it to int
Integer = Union[int, str]

# curve point or its "x,y" text representation, e.g. "0,10"
#
# use ecclab.point.point_from_pointlike to convert it to Point
PointLike = Union[Point, str]
