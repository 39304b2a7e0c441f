"""
models/book.py
--------------
Domain models for books and the book-with-publisher join row.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Book:
    """
    Represents a single book row.

    Attributes:
        title: Book title (required).
        publisher_uuid: Owning publisher; must exist when the book is written.
        uuid: Caller-generated primary key.
    """
    title: str
    publisher_uuid: UUID
    uuid: UUID = field(default_factory=uuid4)

    def __str__(self) -> str:
        return f"{self.title} ({self.uuid})"


@dataclass
class BookPublisher:
    """A book joined with its owning publisher."""
    book_uuid: UUID
    book_title: str
    publisher_uuid: UUID
    publisher_name: str
