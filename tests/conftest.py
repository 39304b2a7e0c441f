"""
tests/conftest.py
-----------------
Shared pytest fixtures: sample rows reused by unit and integration tests.
"""

from uuid import uuid4

import pytest

from models.author import Author
from models.book import Book
from models.publisher import Publisher


@pytest.fixture()
def author() -> Author:
    """A fully-populated author."""
    return Author(
        name="Brian Kernighan",
        bio="Co-author of The C Programming Language and The Go Programming Language",
    )


@pytest.fixture()
def publisher() -> Publisher:
    return Publisher(name="publisher001")


@pytest.fixture()
def book(publisher: Publisher) -> Book:
    """A book owned by the `publisher` fixture."""
    return Book(title="book001", publisher_uuid=publisher.uuid)


@pytest.fixture()
def missing_uuid():
    """A uuid that no row will ever carry."""
    return uuid4()
