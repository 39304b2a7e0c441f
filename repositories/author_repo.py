"""
repositories/author_repo.py
---------------------------
Data access layer for authors.
All SQL queries related to the `author` table live here.
"""

from typing import Optional
from uuid import UUID

from models.author import Author
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthorRepository(BaseRepository):
    """Repository for CRUD operations on the author table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, author: Author) -> None:
        """
        Insert a new author with its caller-generated uuid.

        Raises:
            psycopg2.errors.NotNullViolation: If `name` is missing.
            psycopg2.errors.UniqueViolation: If the uuid is already taken.
        """
        sql = "INSERT INTO author (uuid, name, bio) VALUES (%s, %s, %s);"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (author.uuid, author.name, author.bio))
        except Exception as e:
            logger.error(f"Failed to create author {author.uuid}: {e}")
            raise
        logger.info(f"Created author {author.uuid}")

    # ── READ ──────────────────────────────────────────────

    def get(self, author_uuid: UUID) -> Optional[Author]:
        """
        Fetch a single author.

        Returns:
            An Author or None if no row matches.
        """
        sql = "SELECT uuid, name, bio FROM author WHERE uuid = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (author_uuid,))
            row = cur.fetchone()
            return self._row_to_author(row) if row else None

    def list_all(self) -> list[Author]:
        """Fetch every author ordered by uuid. Empty table yields []."""
        sql = "SELECT uuid, name, bio FROM author ORDER BY uuid;"
        with self._cursor() as cur:
            cur.execute(sql)
            return [self._row_to_author(r) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, author: Author) -> bool:
        """
        Overwrite name and bio of the author matching `author.uuid`.

        Returns:
            True if a row was updated, False if no author has that uuid.
        """
        sql = "UPDATE author SET name = %s, bio = %s WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (author.name, author.bio, author.uuid))
                updated = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to update author {author.uuid}: {e}")
            raise
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, author_uuid: UUID) -> bool:
        """
        Delete an author.

        Returns:
            True if a row was deleted, False otherwise.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If the author is still
                associated with a book.
        """
        sql = "DELETE FROM author WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (author_uuid,))
                deleted = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to delete author {author_uuid}: {e}")
            raise
        if deleted:
            logger.info(f"Deleted author {author_uuid}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_author(row: tuple) -> Author:
        """Convert a database row tuple to an Author domain object."""
        return Author(uuid=row[0], name=row[1], bio=row[2])
