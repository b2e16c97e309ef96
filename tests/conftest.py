"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os

# Module-level engines are built from config at import time; keep them off
# any real database.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("REDIS_URL", None)

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring PostgreSQL (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped PostgreSQL URL with all tables created.

    Skips when TEST_DATABASE_URL does not point at a reachable PostgreSQL.
    """
    from tests import TEST_DB_URL, check_db_available

    if not check_db_available():
        pytest.skip("PostgreSQL test database not available")

    from sqlalchemy import create_engine
    from database.models import Base

    engine = create_engine(TEST_DB_URL)
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    engine.dispose()

    yield TEST_DB_URL

    engine = create_engine(TEST_DB_URL)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="session")
def test_db_url(test_database):
    """Get test database URL."""
    return test_database
