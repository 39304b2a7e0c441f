"""
services/library_service.py
---------------------------
Multi-step library operations. Each public method runs inside a single
transaction so partial work is never left behind.
"""

from typing import Iterable, Optional
from uuid import UUID

from psycopg2 import pool

from db.connection import transaction
from models.author import Author
from models.author_book import AuthorBook, AuthorBookDetails
from models.book import Book, BookPublisher
from models.publisher import Publisher
from repositories.queries import Queries
from utils.logger import get_logger

logger = get_logger(__name__)


class LibraryService:
    """Coordinates authors, publishers and books on top of a connection pool."""

    def __init__(self, db_pool: pool.AbstractConnectionPool, statement_timeout_ms: Optional[int] = None):
        self.db_pool = db_pool
        self.statement_timeout_ms = statement_timeout_ms

    def register_author(self, author: Author) -> Author:
        """Create an author and return the stored row."""
        with transaction(self.db_pool) as conn:
            queries = Queries(conn, self.statement_timeout_ms)
            queries.authors.create(author)
            return queries.authors.get(author.uuid)

    def list_authors(self) -> list[Author]:
        with transaction(self.db_pool) as conn:
            return Queries(conn, self.statement_timeout_ms).authors.list_all()

    def publish_book(
        self, publisher: Publisher, book: Book, author_uuids: Iterable[UUID]
    ) -> BookPublisher:
        """
        Store a book together with its publisher and author links, all or nothing.

        The publisher is created only if it does not exist yet. Every author
        must already exist.

        Args:
            publisher: Owning publisher; must match `book.publisher_uuid`.
            book: The book to create.
            author_uuids: Authors to associate with the book.

        Returns:
            The stored book joined with its publisher.

        Raises:
            ValueError: If `book.publisher_uuid` is not `publisher.uuid`.
            psycopg2.errors.ForeignKeyViolation: If an author does not exist.
                Nothing from this call is persisted.
        """
        if book.publisher_uuid != publisher.uuid:
            raise ValueError(
                f"Book {book.uuid} belongs to publisher {book.publisher_uuid}, not {publisher.uuid}"
            )
        with transaction(self.db_pool) as conn:
            queries = Queries(conn, self.statement_timeout_ms)
            if queries.publishers.get(publisher.uuid) is None:
                queries.publishers.create(publisher)
            queries.books.create(book)
            for author_uuid in author_uuids:
                queries.author_books.create(AuthorBook(author_uuid=author_uuid, book_uuid=book.uuid))
            stored = queries.books.get_with_publisher(book.uuid)
        logger.info(f"Published '{book.title}' under '{publisher.name}'")
        return stored

    def catalog(self) -> list[AuthorBookDetails]:
        """Every author/book pairing with author and title details."""
        with transaction(self.db_pool) as conn:
            return Queries(conn, self.statement_timeout_ms).author_books.list_with_details()
