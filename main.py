"""
main.py
-------
Entry point for the bookshelf demo.

Responsibilities:
    - Open the database connection pool from the environment configuration.
    - List the stored authors, register one, read it back and log each result.
    - Exit with a non-zero status if any step fails.
"""

import sys

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN, DB_STATEMENT_TIMEOUT_MS
from db.connection import close_pool, create_pool
from models.author import Author
from services.library_service import LibraryService
from utils.logger import get_logger

logger = get_logger(__name__)


def run() -> None:
    """Run the demo against the configured database."""

    # ── 1. Database setup ─────────────────────────────────
    db_pool = create_pool(DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX)
    try:
        service = LibraryService(db_pool, DB_STATEMENT_TIMEOUT_MS)

        # ── 2. Existing authors ───────────────────────────
        authors = service.list_authors()
        logger.info(f"Found {len(authors)} author(s): {[str(a) for a in authors]}")

        # ── 3. Register and read back ─────────────────────
        author = service.register_author(
            Author(
                name="Brian Kernighan",
                bio="Co-author of The C Programming Language and The Go Programming Language",
            )
        )
        logger.info(f"Registered author: {author}")
    finally:
        close_pool(db_pool)


def main() -> None:
    try:
        run()
    except Exception as e:
        logger.exception(f"Demo failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
