"""
models/ - Domain Models
=======================
Plain dataclasses returned by the repositories. Instances are transient
value copies of database rows.
"""

from models.author import Author
from models.author_book import AuthorBook, AuthorBookDetails
from models.book import Book, BookPublisher
from models.publisher import Publisher, PublisherBook

__all__ = [
    "Author",
    "AuthorBook",
    "AuthorBookDetails",
    "Book",
    "BookPublisher",
    "Publisher",
    "PublisherBook",
]
