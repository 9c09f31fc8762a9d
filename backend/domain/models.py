"""
Core domain models for the library catalog.
These are framework-agnostic and can be used across controllers and repositories.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional
import uuid

CATALOG_PREFIX = "/catalog"


class BookInstanceStatus(str, Enum):
    """Circulation status offered by the copy form."""
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


@dataclass
class Genre:
    """A named category that books can belong to."""
    id: str
    name: str

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    @property
    def url(self) -> str:
        return f"{CATALOG_PREFIX}/genre/{self.id}"


@dataclass
class Book:
    """
    A title in the catalog.

    Books are read-only from the point of view of the genre and copy
    controllers; only id and title are shown.
    """
    id: str
    title: str
    summary: Optional[str] = None
    isbn: Optional[str] = None
    genre_ids: List[str] = field(default_factory=list)

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())


@dataclass
class BookInstance:
    """
    A physical copy of a book.

    `book` holds the populated Book when the copy was loaded with its
    reference resolved; `book_id` is always set.
    """
    id: str
    book_id: str
    imprint: str
    status: str = BookInstanceStatus.MAINTENANCE.value
    due_back: Optional[date] = None
    book: Optional[Book] = None

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    @property
    def url(self) -> str:
        return f"{CATALOG_PREFIX}/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        if not self.due_back:
            return ""
        return f"{self.due_back:%b} {self.due_back.day}, {self.due_back.year}"

    @property
    def due_back_yyyy_mm_dd(self) -> str:
        return self.due_back.isoformat() if self.due_back else ""
