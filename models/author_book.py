"""
models/author_book.py
---------------------
Many-to-many association between authors and books.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class AuthorBook:
    """Association row keyed by the (author, book) pair. No attributes of its own."""
    author_uuid: UUID
    book_uuid: UUID


@dataclass
class AuthorBookDetails:
    """An association joined with the full author fields and the book title."""
    author_uuid: UUID
    author_name: str
    author_bio: Optional[str]
    book_uuid: UUID
    book_title: str

    def __str__(self) -> str:
        return f"{self.author_name} - {self.book_title}"
