"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def build_database_url(user: str, password: str, host: str, port: int, name: str) -> str:
    """Combine connection parameters into a PostgreSQL connection URL."""
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "bookshelf")
DB_USER: str = os.getenv("DB_USER", "bookshelf")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = build_database_url(DB_USER, DB_PASS, DB_HOST, DB_PORT, DB_NAME)

# ── Pool / statements ─────────────────────────────────────
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))
# 0 disables the per-statement deadline
DB_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "0"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Test database ─────────────────────────────────────────
TEST_DB_HOST: str = os.getenv("TEST_DB_HOST", "localhost")
TEST_DB_PORT: int = int(os.getenv("TEST_DB_PORT", "5432"))
TEST_DB_NAME: str = os.getenv("TEST_DB_NAME", "bookshelf_test")
TEST_DB_USER: str = os.getenv("TEST_DB_USER", "bookshelf")
TEST_DB_PASS: str = os.getenv("TEST_DB_PASS", "")

TEST_DATABASE_URL: str = build_database_url(
    TEST_DB_USER, TEST_DB_PASS, TEST_DB_HOST, TEST_DB_PORT, TEST_DB_NAME
)
