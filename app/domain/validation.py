"""
Validation rules for book records.

Each field validator is a pure function returning a ValidationResult.
``validate_book`` composes them in a fixed order (title, author, ISBN
format, ISBN uniqueness, publication date) and reports only the first
failure, so the same invalid record always yields the same error.

Nothing here raises for an invalid record; callers decide what a failed
result means for them.
"""

from datetime import date, datetime
from typing import Iterable, Optional

from .entities import Book, as_datetime, normalize_isbn
from .value_objects import ValidationErrorKind, ValidationResult

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100
AUTHOR_MIN_LENGTH = 2
AUTHOR_MAX_LENGTH = 50
ISBN_LENGTHS = (10, 13)
EARLIEST_PUBLICATION_DATE = datetime(1450, 1, 1)

DUPLICATE_ISBN_MESSAGE = "This ISBN already exists"


def _validate_text(
    value: Optional[str],
    label: str,
    field: str,
    min_length: int,
    max_length: int,
) -> ValidationResult:
    if value is None or not value.strip():
        return ValidationResult.failure(
            ValidationErrorKind.REQUIRED_FIELD, f"{label} is required", field
        )

    trimmed = value.strip()

    if len(trimmed) < min_length:
        return ValidationResult.failure(
            ValidationErrorKind.TOO_SHORT,
            f"{label} must be at least {min_length} characters",
            field,
        )

    if len(trimmed) > max_length:
        return ValidationResult.failure(
            ValidationErrorKind.TOO_LONG,
            f"{label} cannot exceed {max_length} characters",
            field,
        )

    return ValidationResult.success()


def validate_title(title: Optional[str]) -> ValidationResult:
    """Title must be 2-100 characters once surrounding whitespace is trimmed."""
    return _validate_text(title, "Title", "title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)


def validate_author(author: Optional[str]) -> ValidationResult:
    """Author must be 2-50 characters once surrounding whitespace is trimmed."""
    return _validate_text(author, "Author", "author", AUTHOR_MIN_LENGTH, AUTHOR_MAX_LENGTH)


def validate_isbn(isbn: Optional[str]) -> ValidationResult:
    """
    Check the ISBN format.

    Hyphens are stripped first. What remains must be decimal digits only
    (checked before the length) and exactly 10 or 13 of them. Checksums
    are not verified.
    """
    if isbn is None or not isbn.strip():
        return ValidationResult.failure(
            ValidationErrorKind.REQUIRED_FIELD, "ISBN is required", "isbn"
        )

    digits = normalize_isbn(isbn)

    # ASCII digits only; str.isdigit() would let "²" through
    if not all(char in "0123456789" for char in digits):
        return ValidationResult.failure(
            ValidationErrorKind.INVALID_FORMAT,
            "ISBN must contain only numbers and optional hyphens",
            "isbn",
        )

    if len(digits) not in ISBN_LENGTHS:
        return ValidationResult.failure(
            ValidationErrorKind.INVALID_LENGTH,
            "ISBN must be exactly 10 or 13 digits",
            "isbn",
        )

    return ValidationResult.success()


def validate_publication_date(publication_date: date, now: datetime) -> ValidationResult:
    """
    Publication date must lie between 1450-01-01 and ``now``, both inclusive.

    Args:
        publication_date: The date to check; a bare date means midnight, an
            aware datetime is compared in local time
        now: The current moment, supplied by the caller's clock
    """
    moment = as_datetime(publication_date)
    now = as_datetime(now)

    if moment > now:
        return ValidationResult.failure(
            ValidationErrorKind.FUTURE_DATE,
            "Publication date cannot be in the future",
            "publicationDate",
        )

    if moment < EARLIEST_PUBLICATION_DATE:
        return ValidationResult.failure(
            ValidationErrorKind.TOO_OLD,
            "Publication date must be after 1450",
            "publicationDate",
        )

    return ValidationResult.success()


def is_isbn_unique(
    isbn: str,
    collection: Iterable[Book],
    exclude_id: Optional[int] = None,
) -> bool:
    """
    Check that no other book in ``collection`` has the same normalized ISBN.

    Args:
        isbn: Candidate ISBN, hyphens allowed
        collection: Current catalog snapshot
        exclude_id: Id of the book being updated, skipped so that a book
            never conflicts with itself

    Returns:
        False if some other book already uses the ISBN
    """
    candidate = normalize_isbn(isbn)
    for book in collection:
        if exclude_id is not None and book.id == exclude_id:
            continue
        if book.normalized_isbn() == candidate:
            return False
    return True


def validate_book(
    book: Book,
    collection: Iterable[Book],
    now: datetime,
    exclude_id: Optional[int] = None,
) -> Optional[ValidationResult]:
    """
    Run every check on ``book`` and return the first failure.

    Order: title, author, ISBN format, ISBN uniqueness against
    ``collection``, publication date. Later checks are not run once one
    fails.

    Args:
        book: The candidate record
        collection: Current catalog snapshot for the uniqueness check
        now: The current moment for the publication date check
        exclude_id: Id of the book being updated, if any

    Returns:
        The failing ValidationResult, or None if the book is acceptable
    """
    title_result = validate_title(book.title)
    if not title_result.is_valid:
        return title_result

    author_result = validate_author(book.author)
    if not author_result.is_valid:
        return author_result

    isbn_result = validate_isbn(book.isbn)
    if not isbn_result.is_valid:
        return isbn_result

    if not is_isbn_unique(book.isbn, collection, exclude_id):
        return ValidationResult.failure(
            ValidationErrorKind.DUPLICATE_ISBN, DUPLICATE_ISBN_MESSAGE, "isbn"
        )

    date_result = validate_publication_date(book.publication_date, now)
    if not date_result.is_valid:
        return date_result

    return None
