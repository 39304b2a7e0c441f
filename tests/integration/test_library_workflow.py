"""
tests/integration/test_library_workflow.py
------------------------------------------
LibraryService commits real transactions, so each test cleans up after itself.
"""

from uuid import uuid4

import psycopg2
import pytest

from db.connection import transaction
from models.author import Author
from models.book import Book
from models.publisher import Publisher
from repositories.queries import Queries
from services.library_service import LibraryService


@pytest.fixture()
def service(db_pool):
    return LibraryService(db_pool, 0)


@pytest.fixture()
def cleanup(db_pool):
    """Collects rows to delete once the test is done, children first."""
    rows = {"author_books": [], "books": [], "authors": [], "publishers": []}
    yield rows
    with transaction(db_pool) as conn:
        queries = Queries(conn, 0)
        for author_uuid, book_uuid in rows["author_books"]:
            queries.author_books.delete(author_uuid, book_uuid)
        for book_uuid in rows["books"]:
            queries.books.delete(book_uuid)
        for author_uuid in rows["authors"]:
            queries.authors.delete(author_uuid)
        for publisher_uuid in rows["publishers"]:
            queries.publishers.delete(publisher_uuid)


class TestLibraryService:
    """Atomic multi-step operations."""

    def test_register_author(self, service, cleanup, author) -> None:
        cleanup["authors"].append(author.uuid)
        assert service.register_author(author) == author
        assert author in service.list_authors()

    def test_publish_book(self, service, cleanup) -> None:
        author = Author(name="author001", bio="author001")
        publisher = Publisher(name="publisher001")
        book = Book(title="book001", publisher_uuid=publisher.uuid)
        cleanup["authors"].append(author.uuid)
        cleanup["publishers"].append(publisher.uuid)
        cleanup["books"].append(book.uuid)
        cleanup["author_books"].append((author.uuid, book.uuid))

        service.register_author(author)
        stored = service.publish_book(publisher, book, [author.uuid])

        assert stored.publisher_name == "publisher001"
        assert [row.book_title for row in service.catalog() if row.author_uuid == author.uuid] == ["book001"]

    def test_publish_book_is_all_or_nothing(self, service, db_pool) -> None:
        """An unknown author leaves neither publisher nor book behind."""
        publisher = Publisher(name="publisher001")
        book = Book(title="book001", publisher_uuid=publisher.uuid)

        with pytest.raises(psycopg2.errors.ForeignKeyViolation):
            service.publish_book(publisher, book, [uuid4()])

        with transaction(db_pool, rollback_only=True) as conn:
            queries = Queries(conn, 0)
            assert queries.publishers.get(publisher.uuid) is None
            assert queries.books.get(book.uuid) is None
