"""
repositories/base.py
--------------------
Shared plumbing for the table repositories: the bound connection and the
optional per-statement deadline.
"""

import copy
from contextlib import contextmanager
from typing import Iterator, Optional

from psycopg2 import extensions, extras

from config import DB_STATEMENT_TIMEOUT_MS

# uuid.UUID <-> UUID columns for every connection in the process
extras.register_uuid()


class BaseRepository:
    """
    Executes statements on a caller-owned connection.

    Repositories never commit or roll back; the connection passed in is the
    transaction handle and its owner decides the outcome.

    Args:
        conn: Open psycopg2 connection (or one borrowed via ``transaction``).
        statement_timeout_ms: Deadline applied to every statement with
            ``SET LOCAL statement_timeout``. ``None`` uses the configured
            default; ``0`` disables it.
    """

    def __init__(self, conn: extensions.connection, statement_timeout_ms: Optional[int] = None):
        self.conn = conn
        self.statement_timeout_ms = (
            DB_STATEMENT_TIMEOUT_MS if statement_timeout_ms is None else statement_timeout_ms
        )

    def with_timeout(self, statement_timeout_ms: int):
        """Return a copy bound to the same connection with a different deadline."""
        clone = copy.copy(self)
        clone.statement_timeout_ms = statement_timeout_ms
        return clone

    @contextmanager
    def _cursor(self) -> Iterator[extensions.cursor]:
        with self.conn.cursor() as cur:
            # SET LOCAL outlives the statement, so 0 has to be sent explicitly
            cur.execute("SET LOCAL statement_timeout = %s;", (self.statement_timeout_ms,))
            yield cur
