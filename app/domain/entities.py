"""
Domain entities for the book catalog.

Entities are objects with a unique identity that runs through time and
different representations. They are the core building blocks of the domain.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Optional


def normalize_isbn(isbn: Optional[str]) -> str:
    """
    Strip every hyphen from an ISBN.

    The normalized form is what format, length and uniqueness checks
    compare, so "978-0143109280" and "9780143109280" are the same ISBN.
    """
    return (isbn or "").replace("-", "")


def as_datetime(value: date) -> datetime:
    """
    Bring a date or datetime onto the catalog's naive local timeline.

    A bare date becomes midnight of that day. An aware datetime is converted
    to local time and loses its tzinfo, so it compares safely with naive ones.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


@dataclass
class Book:
    """
    Represents a book in the catalog.

    This is the sole entity of the domain. The catalog assigns ``id`` when
    the book is admitted; until then it is ``None``. Field constraints are
    not checked here: the validation engine decides whether a record is
    acceptable, and the store only ever admits validated records.
    """

    title: str
    """Book title (2-100 characters once trimmed)"""

    author: str
    """Author name (2-50 characters once trimmed)"""

    isbn: str
    """10 or 13 digit ISBN, hyphens allowed"""

    publication_date: datetime
    """Publication date; time of day is ignored by date filters"""

    image_url: Optional[str] = None
    """Cover URL or embedded image data"""

    id: Optional[int] = None
    """Catalog identifier, assigned by the store"""

    def normalized_isbn(self) -> str:
        """The ISBN with hyphens removed."""
        return normalize_isbn(self.isbn)

    def get_published_year(self) -> int:
        """Extract the publication year."""
        return self.publication_date.year

    def get_publication_day(self) -> date:
        """The calendar date of publication, without time of day."""
        return as_datetime(self.publication_date).date()

    def with_id(self, book_id: int) -> "Book":
        """Return a copy of this book carrying the given catalog id."""
        return replace(self, id=book_id)
