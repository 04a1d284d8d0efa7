#!/usr/bin/env python3

# Copyright (C) 2025-2026 The ecclab developers
#
# This file is part of ecclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecclab package."

name = "ecclab"
__version__ = "2026.10.16"
__author__ = "The ecclab developers"
__author_email__ = "devs@ecclab.org"
__copyright__ = "Copyright (C) 2025-2026 The ecclab developers"
__license__ = "MIT License"
