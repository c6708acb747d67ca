"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from database.database import build_session_factory
from database.models import Base
from tests.mocks.profile_mocks import FakeProfileProvider, make_profile


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring an external PostgreSQL (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return build_session_factory(sqlite_engine)


@pytest.fixture
def postgres_session_factory():
    """Session factory on TEST_DATABASE_URL with fresh matching tables."""
    from tests import TEST_DB_URL, check_db_available

    if not check_db_available():
        pytest.skip("TEST_DATABASE_URL not set or database not available")

    engine = create_engine(TEST_DB_URL, pool_size=10)
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield build_session_factory(engine)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def profiles():
    return FakeProfileProvider([
        make_profile("alice", age=25, gender="female", university="MIT",
                     lifestyle="quiet, studious", interests="hiking, reading"),
        make_profile("bob", age=27, gender="female", university="MIT",
                     lifestyle="quiet", interests="hiking, gaming"),
        make_profile("carol", age=40, gender="male", university="Harvard",
                     lifestyle="social, party", interests="clubbing"),
        make_profile("dave", age=25, gender="female", university="MIT",
                     lifestyle="quiet, studious", interests="hiking, reading"),
    ])
