# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Storing Password values in SQLAlchemy columns.

    class User(Base):
        __tablename__ = "users"

        id: Mapped[str] = mapped_column(String(36), primary_key=True)
        password: Mapped[Password] = mapped_column(PasswordHash, nullable=False)

Assumptions:
- Hashes are stored as the verbatim string (60 characters for bcrypt)
- Rows are parsed on load; a malformed stored hash raises FormatError
- Plain strings are parsed before they are written
"""
from typing import Optional, Union

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from bcrypt_password.password import Password


def read_password(value: str) -> Password:
    """Build a Password from a stored string value.

    Args:
        value: Hash string read from storage

    Returns:
        Password: Parsed hash

    Raises:
        FormatError: If the stored value is not a valid bcrypt hash
    """
    return Password(value)


class PasswordHash(TypeDecorator):
    """Column type mapping bcrypt hash strings to Password objects."""

    impl = String(60)
    cache_ok = True

    def process_bind_param(self, value: Optional[Union[Password, str]], dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = read_password(value)
        return str(value)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Password]:
        if value is None:
            return None
        return read_password(value)
