"""
create book
"""

from yoyo import step

__depends__ = {"20240301_02_create-publisher"}

steps = [
    step(
        """
        CREATE TABLE book (
            uuid            UUID PRIMARY KEY,
            title           TEXT NOT NULL,
            publisher_uuid  UUID NOT NULL REFERENCES publisher(uuid)
        )
        """,
        "DROP TABLE book",
    ),
    step(
        "CREATE INDEX idx_book_publisher ON book(publisher_uuid)",
        "DROP INDEX idx_book_publisher",
    ),
]
