"""
db/init_db.py
-------------
Applies (or rolls back) the ordered schema migrations in db/migrations
using yoyo-migrations.
Run this module directly to migrate the configured database:
    python -m db.init_db          # apply pending migrations
    python -m db.init_db down     # roll everything back
"""

import sys
from pathlib import Path

from yoyo import get_backend, read_migrations

from utils.logger import get_logger

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def load_migrations():
    """Read the migration scripts in dependency order."""
    return read_migrations(str(MIGRATIONS_DIR))


def apply_migrations(database_url: str) -> int:
    """
    Apply every pending migration under the yoyo lock.

    Args:
        database_url: PostgreSQL connection URL.

    Returns:
        Number of migrations applied.
    """
    backend = get_backend(database_url)
    migrations = load_migrations()
    try:
        with backend.lock():
            pending = backend.to_apply(migrations)
            backend.apply_migrations(pending)
    except Exception as e:
        logger.error(f"Failed to apply migrations: {e}")
        raise
    logger.info(f"Applied {len(pending)} migration(s).")
    return len(pending)


def rollback_migrations(database_url: str) -> int:
    """
    Roll back every applied migration, newest first.

    Returns:
        Number of migrations rolled back.
    """
    backend = get_backend(database_url)
    migrations = load_migrations()
    try:
        with backend.lock():
            applied = backend.to_rollback(migrations)
            backend.rollback_migrations(applied)
    except Exception as e:
        logger.error(f"Failed to roll back migrations: {e}")
        raise
    logger.info(f"Rolled back {len(applied)} migration(s).")
    return len(applied)


if __name__ == "__main__":
    from config import DATABASE_URL

    if len(sys.argv) > 1 and sys.argv[1] == "down":
        rollback_migrations(DATABASE_URL)
    else:
        apply_migrations(DATABASE_URL)
