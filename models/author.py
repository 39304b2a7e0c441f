"""
models/author.py
----------------
Domain model for book authors.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Author:
    """
    Represents a single author row.

    Attributes:
        name: Display name (required).
        bio: Optional biography.
        uuid: Caller-generated primary key; immutable once stored.
    """
    name: str
    bio: Optional[str] = None
    uuid: UUID = field(default_factory=uuid4)

    def __str__(self) -> str:
        return f"{self.name} ({self.uuid})"
