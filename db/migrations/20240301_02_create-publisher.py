"""
create publisher
"""

from yoyo import step

__depends__ = {"20240301_01_create-author"}

steps = [
    step(
        """
        CREATE TABLE publisher (
            uuid    UUID PRIMARY KEY,
            name    TEXT NOT NULL
        )
        """,
        "DROP TABLE publisher",
    ),
]
