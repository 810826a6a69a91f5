# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Key derivation through the bcrypt library.

Adapts bcrypt.hashpw/gensalt to the operations Password needs:
hashing a fresh secret, and re-deriving a raw digest from an
existing salt and cost.

Assumptions:
- bcrypt generates the salt (gensalt uses os.urandom)
- Passwords longer than 72 bytes are truncated, as bcrypt always did
- Errors raised by bcrypt (invalid rounds, etc.) propagate unchanged
"""
from typing import Union

import bcrypt

from bcrypt_password import codec
from bcrypt_password.config import settings

MIN_COST = 4
MAX_COST = 31
COST_RANGE = range(MIN_COST, MAX_COST + 1)

MAX_PASSWORD_BYTES = 72
SALT_LENGTH = 22
DIGEST_LENGTH = 31
SALT_BYTES = 16
DIGEST_BYTES = 23

# Derivation only depends on salt and cost, so one prefix serves all versions
_DERIVE_PREFIX = b"$2b$"


def default_cost() -> int:
    """Cost used when none is given to Password.create."""
    return settings.default_cost


def _password_bytes(password: Union[str, bytes]) -> bytes:
    if isinstance(password, str):
        password = password.encode("utf-8")
    elif not isinstance(password, bytes):
        raise TypeError("password must be str or bytes")
    return password[:MAX_PASSWORD_BYTES]


def hash_secret(password: Union[str, bytes], cost: int) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Plain text password
        cost: Work factor (log2 of the number of rounds)

    Returns:
        str: Complete bcrypt hash string

    Raises:
        ValueError: If bcrypt rejects the cost
    """
    salt = bcrypt.gensalt(rounds=cost, prefix=settings.hash_version.encode("ascii"))
    hashed = bcrypt.hashpw(_password_bytes(password), salt)
    return hashed.decode("ascii")


def derive_digest(password: Union[str, bytes], salt: str, cost: int) -> bytes:
    """Derive the raw digest for a password, encoded salt and cost.

    Args:
        password: Plain text password
        salt: The 22 encoded salt characters of a hash string
        cost: Work factor

    Returns:
        bytes: 24-byte digest buffer; the last byte is zero and is not
            part of the encoded digest

    Assumptions:
    - Salt has already been validated by the caller
    - Unused low bits of the last salt character are ignored
    """
    salt = codec.encode(codec.decode(salt, SALT_BYTES), SALT_BYTES)
    setting = _DERIVE_PREFIX + f"{cost:02d}$".encode("ascii") + salt.encode("ascii")
    hashed = bcrypt.hashpw(_password_bytes(password), setting)
    encoded = hashed[-DIGEST_LENGTH:]
    return codec.decode(encoded, DIGEST_BYTES) + b"\x00"
