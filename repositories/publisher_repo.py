"""
repositories/publisher_repo.py
------------------------------
Data access layer for publishers.
All SQL queries related to the `publisher` table live here.
"""

from typing import Optional
from uuid import UUID

from models.publisher import Publisher, PublisherBook
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class PublisherRepository(BaseRepository):
    """Repository for CRUD operations on the publisher table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, publisher: Publisher) -> None:
        """Insert a new publisher with its caller-generated uuid."""
        sql = "INSERT INTO publisher (uuid, name) VALUES (%s, %s);"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (publisher.uuid, publisher.name))
        except Exception as e:
            logger.error(f"Failed to create publisher {publisher.uuid}: {e}")
            raise
        logger.info(f"Created publisher {publisher.uuid}")

    # ── READ ──────────────────────────────────────────────

    def get(self, publisher_uuid: UUID) -> Optional[Publisher]:
        """Fetch a single publisher, or None."""
        sql = "SELECT uuid, name FROM publisher WHERE uuid = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (publisher_uuid,))
            row = cur.fetchone()
            return Publisher(uuid=row[0], name=row[1]) if row else None

    def list_all(self) -> list[Publisher]:
        sql = "SELECT uuid, name FROM publisher ORDER BY uuid;"
        with self._cursor() as cur:
            cur.execute(sql)
            return [Publisher(uuid=r[0], name=r[1]) for r in cur.fetchall()]

    def get_books(self, publisher_uuid: UUID) -> list[PublisherBook]:
        """
        Fetch every book owned by a publisher, one row per book.

        Each row repeats the publisher fields. An unknown publisher and a
        publisher without books both yield [].
        """
        sql = """
            SELECT p.uuid, p.name, b.uuid, b.title
            FROM publisher p
            JOIN book b ON b.publisher_uuid = p.uuid
            WHERE p.uuid = %s
            ORDER BY b.uuid;
        """
        with self._cursor() as cur:
            cur.execute(sql, (publisher_uuid,))
            return [
                PublisherBook(
                    publisher_uuid=r[0],
                    publisher_name=r[1],
                    book_uuid=r[2],
                    book_title=r[3],
                )
                for r in cur.fetchall()
            ]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, publisher: Publisher) -> bool:
        """
        Rename the publisher matching `publisher.uuid`.

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = "UPDATE publisher SET name = %s WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (publisher.name, publisher.uuid))
                updated = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to update publisher {publisher.uuid}: {e}")
            raise
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, publisher_uuid: UUID) -> bool:
        """
        Delete a publisher.

        Returns:
            True if a row was deleted, False otherwise.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If books still reference it.
        """
        sql = "DELETE FROM publisher WHERE uuid = %s;"
        try:
            with self._cursor() as cur:
                cur.execute(sql, (publisher_uuid,))
                deleted = cur.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to delete publisher {publisher_uuid}: {e}")
            raise
        if deleted:
            logger.info(f"Deleted publisher {publisher_uuid}")
        return deleted
