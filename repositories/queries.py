"""
repositories/queries.py
-----------------------
Bundles every table repository over one connection so a caller can hand a
single object around for the lifetime of a transaction.
"""

from typing import Optional

from psycopg2 import extensions

from repositories.author_book_repo import AuthorBookRepository
from repositories.author_repo import AuthorRepository
from repositories.book_repo import BookRepository
from repositories.publisher_repo import PublisherRepository


class Queries:
    """All repositories bound to the same connection and deadline."""

    def __init__(self, conn: extensions.connection, statement_timeout_ms: Optional[int] = None):
        self.conn = conn
        self.statement_timeout_ms = statement_timeout_ms
        self.authors = AuthorRepository(conn, statement_timeout_ms)
        self.publishers = PublisherRepository(conn, statement_timeout_ms)
        self.books = BookRepository(conn, statement_timeout_ms)
        self.author_books = AuthorBookRepository(conn, statement_timeout_ms)

    def with_conn(self, conn: extensions.connection) -> "Queries":
        """Rebind to another connection, keeping the deadline."""
        return Queries(conn, self.statement_timeout_ms)

    def with_timeout(self, statement_timeout_ms: int) -> "Queries":
        """Same connection, different per-statement deadline."""
        return Queries(self.conn, statement_timeout_ms)
