#!/usr/bin/env python3

# Copyright (C) 2024-2026 The cryptomath developers
#
# This file is part of cryptomath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cryptomath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the cryptomath package."

name = "cryptomath"
__version__ = "2026.10.19"
__author__ = "The cryptomath developers"
__author_email__ = "devs@cryptomath.dev"
__copyright__ = "Copyright (C) 2024-2026 The cryptomath developers"
__license__ = "MIT License"
