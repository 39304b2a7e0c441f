"""
tests/unit/conftest.py
----------------------
Mock connection and cursor so repositories can be exercised without a database.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def mock_cursor() -> MagicMock:
    """Cursor returned by ``with conn.cursor() as cur``."""
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    cur.rowcount = 0
    return cur


@pytest.fixture()
def mock_conn(mock_cursor: MagicMock) -> MagicMock:
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    return conn


@pytest.fixture()
def mock_pool(mock_conn: MagicMock) -> MagicMock:
    """Pool whose getconn always hands out `mock_conn`."""
    db_pool = MagicMock()
    db_pool.getconn.return_value = mock_conn
    return db_pool
