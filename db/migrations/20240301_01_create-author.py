"""
create author
"""

from yoyo import step

__depends__ = {}

steps = [
    step(
        """
        CREATE TABLE author (
            uuid    UUID PRIMARY KEY,
            name    TEXT NOT NULL,
            bio     TEXT
        )
        """,
        "DROP TABLE author",
    ),
]
