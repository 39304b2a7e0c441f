"""
models/publisher.py
-------------------
Domain models for publishers and the publisher-to-books join row.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Publisher:
    """A publisher row. `uuid` is generated by the caller."""
    name: str
    uuid: UUID = field(default_factory=uuid4)

    def __str__(self) -> str:
        return f"{self.name} ({self.uuid})"


@dataclass
class PublisherBook:
    """One book owned by a publisher, with the publisher fields repeated."""
    publisher_uuid: UUID
    publisher_name: str
    book_uuid: UUID
    book_title: str
