"""
db/connection.py
----------------
Manages PostgreSQL connection pools and transaction scopes.
Uses psycopg2's ThreadedConnectionPool; the pool is created by the caller
and passed explicitly to whatever needs it.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import extensions, pool, sql

from utils.logger import get_logger

logger = get_logger(__name__)


def create_pool(database_url: str, min_conn: int = 1, max_conn: int = 5) -> pool.ThreadedConnectionPool:
    """
    Open a connection pool against the given database.

    Args:
        database_url: PostgreSQL connection URL.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        A ready-to-use ThreadedConnectionPool.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        db_pool = pool.ThreadedConnectionPool(min_conn, max_conn, database_url)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    logger.info("Database connection pool initialized successfully.")
    return db_pool


def close_pool(db_pool: pool.AbstractConnectionPool) -> None:
    """Close all connections in the pool."""
    db_pool.closeall()
    logger.info("Database connection pool closed.")


@contextmanager
def transaction(
    db_pool: pool.AbstractConnectionPool, rollback_only: bool = False
) -> Iterator[extensions.connection]:
    """
    Borrow a connection and run the enclosed block as one transaction.

    Commits on normal exit, or rolls back when ``rollback_only`` is set.
    Any exception rolls the transaction back and is re-raised. The
    connection goes back to the pool on every exit path.

    Args:
        db_pool: Pool to borrow the connection from.
        rollback_only: Discard the work even when the block succeeds.

    Yields:
        The connection acting as the transaction handle.
    """
    conn = db_pool.getconn()
    try:
        yield conn
        if rollback_only:
            conn.rollback()
        else:
            conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        db_pool.putconn(conn)


@contextmanager
def savepoint(conn: extensions.connection, name: str = "sp") -> Iterator[extensions.connection]:
    """
    Nested scope inside an already open transaction.

    On error the work done since the savepoint is undone and the original
    exception re-raised; the outer transaction stays usable. The savepoint
    is released only when the block succeeds.
    """
    ident = sql.Identifier(name)
    with conn.cursor() as cur:
        cur.execute(sql.SQL("SAVEPOINT {};").format(ident))
    try:
        yield conn
    except Exception:
        try:
            with conn.cursor() as cur:
                cur.execute(sql.SQL("ROLLBACK TO SAVEPOINT {};").format(ident))
        except psycopg2.Error as rollback_error:
            logger.error(f"Failed to roll back to savepoint {name}: {rollback_error}")
        raise
    else:
        with conn.cursor() as cur:
            cur.execute(sql.SQL("RELEASE SAVEPOINT {};").format(ident))


def cancel(conn: extensions.connection) -> None:
    """
    Abort the statement currently running on ``conn``.

    Safe to call from another thread; the blocked caller receives
    ``psycopg2.errors.QueryCanceled``.
    """
    conn.cancel()
    logger.info("Cancellation requested for in-flight statement.")
