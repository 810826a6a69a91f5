# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

This module provides test fixtures that are shared across the test suite.

Assumptions:
- bcrypt work is kept at the minimum cost (4) so tests stay fast
- Settings are restored after each test that changes them
- Database fixtures use in-memory SQLite
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Known hash of "secret" at cost 4, shared by every supported version
SECRET_SALT = "ZsHrsVlj.dsmn74Az1rjme"
SECRET_DIGEST = "E/21nYRC0vB5LPjG7ySBfi6lRaO/P22"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "integration: tests that use a database")
    config.addinivalue_line("markers", "hypothesis: property-based tests")


@pytest.fixture
def secret_hashes():
    """Hashes of "secret" for every supported version.

    Returns:
        dict: version -> hash string
    """
    return {
        version: f"${version}$04${SECRET_SALT}{SECRET_DIGEST}"
        for version in ("2", "2a", "2b", "2y")
    }


@pytest.fixture
def fast_settings(monkeypatch):
    """Lower the default cost so Password.create stays cheap.

    Returns:
        Settings: The patched settings object
    """
    from bcrypt_password.config import settings

    monkeypatch.setattr(settings, "default_cost", 4)
    return settings


@pytest.fixture
def security_events(monkeypatch):
    """Record security events raised by the password module.

    Returns:
        list: (event, kwargs) tuples in call order
    """
    import bcrypt_password.password as password_module

    events = []

    def record(event, **kwargs):
        events.append((event, kwargs))

    monkeypatch.setattr(password_module, "log_security_event", record)
    return events


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite engine.

    Assumptions:
    - StaticPool keeps the single in-memory connection alive
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create a session bound to the in-memory engine.

    Returns:
        Session: SQLAlchemy session
    """
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
