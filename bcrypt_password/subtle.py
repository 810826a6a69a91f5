# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Constant-time comparison.

Assumptions:
- Running time does not depend on where the operands first differ
- Strings are compared as their UTF-8 bytes
"""
import hmac
from typing import Union


def constant_time_compare(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """Compare two values without leaking the position of a mismatch.

    Args:
        a: First operand
        b: Second operand

    Returns:
        bool: True if both operands are equal
    """
    if isinstance(a, str):
        a = a.encode("utf-8")
    if isinstance(b, str):
        b = b.encode("utf-8")
    return hmac.compare_digest(a, b)
