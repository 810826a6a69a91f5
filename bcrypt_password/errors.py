# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Exceptions raised by bcrypt_password.

Assumptions:
- Errors from the bcrypt library itself are not wrapped
- FormatError is also a ValueError so generic input handling catches it
"""


class BCryptError(Exception):
    """Base class for errors raised by this package."""
    pass


class FormatError(BCryptError, ValueError):
    """Raised when a hash string or encoded value is malformed."""
    pass
