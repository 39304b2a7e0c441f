"""
tests/integration/test_author_book_crud.py
------------------------------------------
The author/book association table.
"""

from itertools import product

import psycopg2
import pytest

from db.connection import savepoint
from models.author import Author
from models.author_book import AuthorBook, AuthorBookDetails
from models.book import Book


@pytest.fixture()
def stored(queries, author, publisher, book):
    """author001, publisher001 and book001 already in the database."""
    author.name = author.bio = "author001"
    queries.authors.create(author)
    queries.publishers.create(publisher)
    queries.books.create(book)
    return author, book


class TestAuthorBook:
    """Create / get / delete for associations."""

    def test_create_then_get(self, queries, stored) -> None:
        author, book = stored
        pair = AuthorBook(author_uuid=author.uuid, book_uuid=book.uuid)

        queries.author_books.create(pair)

        assert queries.author_books.get(author.uuid, book.uuid) == pair

    def test_delete_then_get(self, queries, stored) -> None:
        author, book = stored
        queries.author_books.create(AuthorBook(author_uuid=author.uuid, book_uuid=book.uuid))

        assert queries.author_books.delete(author.uuid, book.uuid) is True
        assert queries.author_books.get(author.uuid, book.uuid) is None

    def test_duplicate_pair_fails(self, conn, queries, stored) -> None:
        """The (author, book) pair is the primary key; a second insert is rejected."""
        author, book = stored
        pair = AuthorBook(author_uuid=author.uuid, book_uuid=book.uuid)
        queries.author_books.create(pair)

        with pytest.raises(psycopg2.errors.UniqueViolation):
            with savepoint(conn):
                queries.author_books.create(pair)
        assert queries.author_books.get(author.uuid, book.uuid) == pair

    def test_unknown_author_fails(self, conn, queries, stored, missing_uuid) -> None:
        _, book = stored
        with pytest.raises(psycopg2.errors.ForeignKeyViolation):
            with savepoint(conn):
                queries.author_books.create(AuthorBook(author_uuid=missing_uuid, book_uuid=book.uuid))
        assert queries.author_books.get(missing_uuid, book.uuid) is None

    def test_unknown_book_fails(self, conn, queries, stored, missing_uuid) -> None:
        author, _ = stored
        with pytest.raises(psycopg2.errors.ForeignKeyViolation):
            with savepoint(conn):
                queries.author_books.create(AuthorBook(author_uuid=author.uuid, book_uuid=missing_uuid))
        assert queries.author_books.get(author.uuid, missing_uuid) is None

    def test_author_with_books_cannot_be_deleted(self, conn, queries, stored) -> None:
        author, book = stored
        queries.author_books.create(AuthorBook(author_uuid=author.uuid, book_uuid=book.uuid))

        with pytest.raises(psycopg2.errors.ForeignKeyViolation):
            with savepoint(conn):
                queries.authors.delete(author.uuid)
        assert queries.authors.get(author.uuid) is not None


class TestListWithDetails:
    """Tests for AuthorBookRepository.list_with_details."""

    def test_every_author_with_every_book(self, queries, publisher) -> None:
        """Two authors x two books gives four detail rows."""
        authors = [
            Author(name="author001", bio="author001"),
            Author(name="author002", bio="author001"),
        ]
        books = [
            Book(title="book001", publisher_uuid=publisher.uuid),
            Book(title="book002", publisher_uuid=publisher.uuid),
        ]
        for author in authors:
            queries.authors.create(author)
        queries.publishers.create(publisher)
        for book in books:
            queries.books.create(book)
        for author, book in product(authors, books):
            queries.author_books.create(AuthorBook(author_uuid=author.uuid, book_uuid=book.uuid))

        result = queries.author_books.list_with_details()

        expected = sorted(
            (
                AuthorBookDetails(a.uuid, a.name, a.bio, b.uuid, b.title)
                for a, b in product(authors, books)
            ),
            key=lambda row: (row.author_uuid, row.book_uuid),
        )
        assert len(result) == 4
        assert result == expected

    def test_empty(self, queries) -> None:
        assert queries.author_books.list_with_details() == []
