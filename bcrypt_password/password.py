# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Generate, read and verify bcrypt hashes.

    password = Password.create("super secret", cost=10)
    # => $2b$10$rI4xRiuAN2fyiKwynO6PPuorfuoM4L2PVv6hlnVJEmNLjqcibAfHq

    password.verify("wrong secret")  # => False
    password.verify("super secret")  # => True

Assumptions:
- Hash strings look like $<version>$<cost>$<salt:22><digest:31>
- Parsing is eager: a Password either exists fully validated or not at all
- The original string is kept verbatim and is what str() returns
- Instances are immutable and safe to share between threads
"""
from typing import NoReturn, Optional, Union

from bcrypt_password import codec, kdf
from bcrypt_password.errors import FormatError
from bcrypt_password.logging_utils import log_application_event, log_security_event
from bcrypt_password.subtle import constant_time_compare

SUPPORTED_VERSIONS = ("2", "2a", "2b", "2y")


class Password:
    """A parsed bcrypt hash.

    Attributes:
        version: "2", "2a", "2b" or "2y"
        cost: Work factor, inside kdf.COST_RANGE
        salt: The 22 encoded salt characters
        digest: The 31 encoded digest characters
        raw: The hash string exactly as it was given

    Assumptions:
    - Equality compares raw strings (not a secret comparison)
    - verify() is the only comparison involving a candidate password
    """

    __slots__ = ("_raw", "_version", "_cost", "_salt", "_digest")

    def __init__(self, raw_hash: str):
        """Load a bcrypt hash.

            password = Password("$2a$10$X6rw/jDiLBuzHV./JjBNXe8/Po4wTL0fhdDNdAdjcKN/Fup8tGCya")
            password.version  # => "2a"
            password.salt     # => b"X6rw/jDiLBuzHV./JjBNXe"
            password.digest   # => b"8/Po4wTL0fhdDNdAdjcKN/Fup8tGCya"

        Raises:
            FormatError: If the string is not a supported bcrypt hash
        """
        if not isinstance(raw_hash, str):
            raise TypeError("hash must be a str")
        if raw_hash.count("$") != 3 or not raw_hash.startswith("$"):
            _reject("Invalid hash string")

        version = _parse_version(raw_hash)
        offset = 1 + len(version)
        if raw_hash[offset:offset + 1] != "$":
            _reject("Invalid hash string")

        cost = _parse_cost(raw_hash[offset + 1:offset + 3])
        if raw_hash[offset + 3:offset + 4] != "$":
            _reject("Invalid hash string")

        salt_start = offset + 4
        salt = raw_hash[salt_start:salt_start + kdf.SALT_LENGTH]
        digest = raw_hash[salt_start + kdf.SALT_LENGTH:]
        if len(salt) != kdf.SALT_LENGTH:
            _reject(f"Invalid salt size: {len(salt)}")
        if len(digest) != kdf.DIGEST_LENGTH:
            _reject(f"Invalid digest size: {len(digest)}")
        if not _is_encoded(salt):
            _reject("Invalid salt encoding")
        if not _is_encoded(digest):
            _reject("Invalid digest encoding")

        self._version = version
        self._cost = cost
        self._salt = salt.encode("ascii")
        self._digest = digest.encode("ascii")
        # Set last: once _raw exists the instance is frozen
        self._raw = raw_hash

    @classmethod
    def create(cls, password: Union[str, bytes], cost: Optional[int] = None) -> "Password":
        """Hash a password.

        Args:
            password: Plain text password
            cost: Work factor, defaults to settings.default_cost

        Returns:
            Password: The new hash

        Raises:
            ValueError: If bcrypt rejects the cost (not validated here)
        """
        if cost is None:
            cost = kdf.default_cost()
        hashed = cls(kdf.hash_secret(password, cost))
        log_application_event("password_hashed", version=hashed.version, cost=hashed.cost)
        return hashed

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def version(self) -> str:
        return self._version

    @property
    def cost(self) -> int:
        return self._cost

    @property
    def salt(self) -> bytes:
        return self._salt

    @property
    def digest(self) -> bytes:
        return self._digest

    def verify(self, password: Union[str, bytes]) -> bool:
        """Verify a password against the hash.

            password = Password.create("super secret")
            password.verify("wrong secret")  # => False
            password.verify("super secret")  # => True

        Returns:
            bool: True if the password matches

        Assumptions:
        - A wrong password is a False result, never an exception
        - Digests are compared in constant time
        """
        raw_digest = kdf.derive_digest(password, self._salt.decode("ascii"), self._cost)
        matches = constant_time_compare(self._digest, codec.encode(raw_digest))
        if not matches:
            log_security_event(
                "password_verification_failed",
                reason="digest_mismatch",
                version=self._version,
                cost=self._cost,
            )
        return matches

    def needs_rehash(self, cost: Optional[int] = None) -> bool:
        """Return True if the hash was made with less work than wanted.

        Args:
            cost: Target work factor, defaults to settings.default_cost
        """
        if cost is None:
            cost = kdf.default_cost()
        return self._cost < cost

    def __setattr__(self, name, value):
        if hasattr(self, "_raw"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __reduce__(self):
        # Rebuild by parsing; slot-by-slot restore would hit __setattr__
        return (Password, (self._raw,))

    def __eq__(self, other):
        if not isinstance(other, Password):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw

    def __repr__(self):
        return self._raw


def _reject(reason: str) -> NoReturn:
    log_security_event("hash_parse_failed", reason=reason)
    raise FormatError(reason)


def _parse_version(raw_hash: str) -> str:
    # raw_hash[2] is the character after the leading "$2"
    if raw_hash[2:3] in ("a", "b", "y"):
        version = raw_hash[1:3]
    elif raw_hash[2:3] == "$":
        version = raw_hash[1:2]
    else:
        version = raw_hash[1:3]
    if version not in SUPPORTED_VERSIONS:
        _reject("Invalid hash version")
    return version


def _parse_cost(field: str) -> int:
    if len(field) != 2 or not all("0" <= char <= "9" for char in field):
        _reject(f"Invalid cost: {field}")
    cost = 0
    for char in field:
        cost = cost * 10 + (ord(char) - ord("0"))
    if cost not in kdf.COST_RANGE:
        _reject(f"Invalid cost: {cost}")
    return cost


def _is_encoded(text: str) -> bool:
    return all(codec.char64(char) != -1 for char in text)
