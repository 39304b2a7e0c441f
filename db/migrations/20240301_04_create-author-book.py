"""
create author_book
"""

from yoyo import step

__depends__ = {"20240301_03_create-book"}

steps = [
    step(
        """
        CREATE TABLE author_book (
            author_uuid UUID NOT NULL REFERENCES author(uuid),
            book_uuid   UUID NOT NULL REFERENCES book(uuid),
            PRIMARY KEY (author_uuid, book_uuid)
        )
        """,
        "DROP TABLE author_book",
    ),
]
