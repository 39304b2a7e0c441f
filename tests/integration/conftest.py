"""
tests/integration/conftest.py
-----------------------------
Fixtures backed by a real PostgreSQL database at TEST_DATABASE_URL.

The schema is migrated once per session and rolled back afterwards. Every
test runs inside its own transaction that is always rolled back, so tests
never see each other's rows. The whole directory is skipped when the
database cannot be reached.
"""

import psycopg2
import pytest

from config import TEST_DATABASE_URL
from db.connection import close_pool, create_pool, transaction
from db.init_db import apply_migrations, rollback_migrations
from repositories.queries import Queries


@pytest.fixture(scope="session")
def db_pool():
    """Migrated database and a small pool over it."""
    try:
        reachable = psycopg2.connect(TEST_DATABASE_URL, connect_timeout=3)
    except psycopg2.OperationalError as e:
        pytest.skip(f"PostgreSQL test database unavailable: {e}")
    reachable.close()

    apply_migrations(TEST_DATABASE_URL)
    db_pool = create_pool(TEST_DATABASE_URL, 1, 4)
    yield db_pool
    close_pool(db_pool)
    rollback_migrations(TEST_DATABASE_URL)


@pytest.fixture()
def conn(db_pool):
    """A connection whose transaction is discarded after the test."""
    with transaction(db_pool, rollback_only=True) as conn:
        yield conn


@pytest.fixture()
def queries(conn) -> Queries:
    return Queries(conn, 0)


@pytest.fixture()
def other_conn(db_pool):
    """A second, independent transaction used to hold conflicting locks."""
    with transaction(db_pool, rollback_only=True) as other:
        yield other
