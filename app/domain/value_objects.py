"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class ValidationErrorKind(str, Enum):
    """Why a book record (or a lookup) was rejected."""

    REQUIRED_FIELD = "RequiredField"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_LENGTH = "InvalidLength"
    DUPLICATE_ISBN = "DuplicateIsbn"
    FUTURE_DATE = "FutureDate"
    TOO_OLD = "TooOld"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single validation check.

    A passing result carries no payload. A failing result carries the
    error kind, a human-readable message and the name of the field the
    error belongs to.
    """

    is_valid: bool
    """True when the check passed"""

    kind: Optional[ValidationErrorKind] = None
    """Error kind, set only on failure"""

    message: Optional[str] = None
    """Human-readable message, set only on failure"""

    field: Optional[str] = None
    """Wire name of the offending field (e.g. 'publicationDate')"""

    def __post_init__(self) -> None:
        """Validate result consistency."""
        if self.is_valid and self.kind is not None:
            raise ValueError("a passing result cannot carry an error kind")

        if not self.is_valid and (self.kind is None or not self.message):
            raise ValueError("a failing result needs both an error kind and a message")

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(
        cls,
        kind: ValidationErrorKind,
        message: str,
        field: Optional[str] = None,
    ) -> "ValidationResult":
        return cls(is_valid=False, kind=kind, message=message, field=field)


@dataclass(frozen=True)
class BookQuery:
    """
    Listing parameters: text search, date range, year bucket and sort.

    Every parameter is optional. Unknown year buckets, sort keys or sort
    orders are not errors; the query engine falls back to its defaults.
    """

    search_query: str = ""
    """Case-insensitive substring matched against title, author and ISBN"""

    year_filter: str = "all"
    """Legacy year bucket: 'before2000', '2000-2010', 'after2010' or 'all'"""

    sort_by: str = "title"
    """Sort key: 'title', 'author' or 'date'"""

    sort_order: str = "asc"
    """'asc' or 'desc'"""

    min_date: Optional[date] = None
    """Earliest publication day (inclusive)"""

    max_date: Optional[date] = None
    """Latest publication day (inclusive)"""

    def has_date_range(self) -> bool:
        """Check if either end of the date range is set."""
        return self.min_date is not None or self.max_date is not None
