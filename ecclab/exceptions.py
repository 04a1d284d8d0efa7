#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to dicriminate between Exceptions
being raised by ecclab from those raised by other codebase.
Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecclab versions are derived.

The specialized classes mark the recoverable input errors
a caller may want to report back to the user:
an off-curve point, a malformed hex-string,
or a scalar outside the 1..n-1 range.
"""


class ECCLabValueError(ValueError):
    pass


class ECCLabTypeError(TypeError):
    pass


class ECCLabRuntimeError(RuntimeError):
    pass


class PointNotOnCurveError(ECCLabValueError):
    pass


class MalformedHexError(ECCLabValueError):
    pass


class ScalarOutOfRangeError(ECCLabValueError):
    pass
