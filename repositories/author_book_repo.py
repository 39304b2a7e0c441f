"""
repositories/author_book_repo.py
--------------------------------
Data access layer for the author/book association table.
"""

from typing import Optional
from uuid import UUID

from models.author_book import AuthorBook, AuthorBookDetails
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthorBookRepository(BaseRepository):
    """Repository for the author_book many-to-many table."""

    def create(self, author_book: AuthorBook) -> None:
        """
        Associate an author with a book.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If either side does not exist.
            psycopg2.errors.UniqueViolation: If the pair is already associated.
        """
        sql = "INSERT INTO author_book (author_uuid, book_uuid) VALUES (%s, %s);"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (author_book.author_uuid, author_book.book_uuid))
        except Exception as e:
            logger.error(
                f"Failed to associate author {author_book.author_uuid} "
                f"with book {author_book.book_uuid}: {e}"
            )
            raise
        logger.info(f"Associated author {author_book.author_uuid} with book {author_book.book_uuid}")

    def get(self, author_uuid: UUID, book_uuid: UUID) -> Optional[AuthorBook]:
        sql = """
            SELECT author_uuid, book_uuid FROM author_book
            WHERE author_uuid = %s AND book_uuid = %s;
        """
        with self._cursor() as cur:
            cur.execute(sql, (author_uuid, book_uuid))
            row = cur.fetchone()
            return AuthorBook(author_uuid=row[0], book_uuid=row[1]) if row else None

    def delete(self, author_uuid: UUID, book_uuid: UUID) -> bool:
        """Remove one association. Returns False when the pair was not associated."""
        sql = "DELETE FROM author_book WHERE author_uuid = %s AND book_uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (author_uuid, book_uuid))
                deleted = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to remove author {author_uuid} from book {book_uuid}: {e}")
            raise
        return deleted

    def list_with_details(self) -> list[AuthorBookDetails]:
        """
        Fetch every association joined with its author and book.

        Returns:
            One AuthorBookDetails per (author, book) pair, ordered by
            author uuid then book uuid.
        """
        sql = """
            SELECT a.uuid, a.name, a.bio, b.uuid, b.title
            FROM author_book ab
            JOIN author a ON a.uuid = ab.author_uuid
            JOIN book b ON b.uuid = ab.book_uuid
            ORDER BY a.uuid, b.uuid;
        """
        with self._cursor() as cur:
            cur.execute(sql)
            return [
                AuthorBookDetails(
                    author_uuid=r[0],
                    author_name=r[1],
                    author_bio=r[2],
                    book_uuid=r[3],
                    book_title=r[4],
                )
                for r in cur.fetchall()
            ]
