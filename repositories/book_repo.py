"""
repositories/book_repo.py
-------------------------
Data access layer for books.
All SQL queries related to the `book` table live here.
"""

from typing import Optional
from uuid import UUID

from models.book import Book, BookPublisher
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class BookRepository(BaseRepository):
    """Repository for CRUD operations on the book table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, book: Book) -> None:
        """
        Insert a new book under an existing publisher.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If `publisher_uuid` does not
                reference an existing publisher. No row is inserted.
        """
        sql = "INSERT INTO book (uuid, title, publisher_uuid) VALUES (%s, %s, %s);"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (book.uuid, book.title, book.publisher_uuid))
        except Exception as e:
            logger.error(f"Failed to create book {book.uuid}: {e}")
            raise
        logger.info(f"Created book {book.uuid} for publisher {book.publisher_uuid}")

    # ── READ ──────────────────────────────────────────────

    def get(self, book_uuid: UUID) -> Optional[Book]:
        """
        Fetch a single book.

        Returns:
            A Book or None if not found.
        """
        sql = "SELECT uuid, title, publisher_uuid FROM book WHERE uuid = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (book_uuid,))
            row = cur.fetchone()
            return self._row_to_book(row) if row else None

    def list_all(self) -> list[Book]:
        """Fetch every book ordered by uuid."""
        sql = "SELECT uuid, title, publisher_uuid FROM book ORDER BY uuid;"
        with self._cursor() as cur:
            cur.execute(sql)
            return [self._row_to_book(r) for r in cur.fetchall()]

    def get_with_publisher(self, book_uuid: UUID) -> Optional[BookPublisher]:
        """
        Fetch a book joined with its owning publisher.

        Returns:
            A BookPublisher row or None if the book does not exist.
        """
        sql = """
            SELECT b.uuid, b.title, p.uuid, p.name
            FROM book b
            JOIN publisher p ON p.uuid = b.publisher_uuid
            WHERE b.uuid = %s;
        """
        with self._cursor() as cur:
            cur.execute(sql, (book_uuid,))
            row = cur.fetchone()
            if row is None:
                return None
            return BookPublisher(
                book_uuid=row[0],
                book_title=row[1],
                publisher_uuid=row[2],
                publisher_name=row[3],
            )

    # ── UPDATE ────────────────────────────────────────────

    def update(self, book: Book) -> bool:
        """
        Retitle the book matching `book.uuid`.
        The publisher reference is not touched.

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = "UPDATE book SET title = %s WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (book.title, book.uuid))
                updated = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to update book {book.uuid}: {e}")
            raise
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, book_uuid: UUID) -> bool:
        """
        Delete a book.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM book WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (book_uuid,))
                deleted = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to delete book {book_uuid}: {e}")
            raise
        if deleted:
            logger.info(f"Deleted book {book_uuid}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_book(row: tuple) -> Book:
        """Convert a database row tuple to a Book domain object."""
        return Book(uuid=row[0], title=row[1], publisher_uuid=row[2])
