# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for bcrypt_password.

Provides specialized logging functions for:
- Application logs (hashes created)
- Security logs (malformed hashes, failed verifications)

Assumptions:
- All logs use structlog for structured output
- Cleartext passwords, salts and digests are never logged
"""
from typing import Any, Dict, Optional

from bcrypt_password.logging_config import get_logger

app_logger = get_logger("bcrypt_password.application")
security_logger = get_logger("bcrypt_password.security")

SENSITIVE_FIELDS = {"password", "secret", "hash", "digest", "salt", "token"}


def log_application_event(
    event: str,
    **kwargs: Any
) -> None:
    """Log an application operational event.

    Args:
        event: Event name (e.g., "password_hashed")
        **kwargs: Additional context (version, cost, etc.)
    """
    app_logger.info(event, **_sanitize_data(kwargs))


def log_security_event(
    event: str,
    reason: Optional[str] = None,
    **kwargs: Any
) -> None:
    """Log a security event for forensics.

    Args:
        event: Security event type (hash_parse_failed, password_verification_failed)
        reason: Reason for security event
        **kwargs: Additional context

    Assumptions:
    - Used for malformed stored hashes and wrong passwords
    - Helps detect corrupted storage and guessing attempts
    """
    security_logger.warning(
        event,
        reason=reason,
        **_sanitize_data(kwargs)
    )


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize sensitive data from log entries.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        Dict: Sanitized dictionary with sensitive fields redacted
    """
    if not data:
        return data

    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = _sanitize_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                _sanitize_data(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized
