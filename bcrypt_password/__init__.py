# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Parse, create and verify bcrypt password hashes.
"""
from bcrypt_password.errors import BCryptError, FormatError
from bcrypt_password.password import SUPPORTED_VERSIONS, Password

__all__ = ["BCryptError", "FormatError", "Password", "SUPPORTED_VERSIONS"]
