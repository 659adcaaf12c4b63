"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from datetime import datetime
from typing import Optional

from app.domain import entities as domain
from app.domain import value_objects as domain_vo
from app.domain.errors import BookNotFoundError, InvalidBookError
from app.api.v1 import schemas as api


def parse_date_param(name: str, value: Optional[str]) -> Optional[datetime]:
    """
    Parse a date query parameter, handling partial dates like '2023' or '2023-05'.

    Args:
        name: Parameter name, used in the error message
        value: Raw query string value; None or blank means "not given"

    Returns:
        The parsed datetime, or None when the parameter is absent

    Raises:
        ValueError: If the value is not a recognizable date
    """
    if value is None or not value.strip():
        return None

    text = value.strip()

    # Try full ISO format first; an offset is folded into local time
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        pass
    else:
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return parsed

    # Year-month, then year only
    for fmt in ("%Y-%m", "%Y"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            pass

    raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD), got '{value}'")


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book entity to an API Book model.

    Args:
        book: Domain Book entity (must already carry an id)

    Returns:
        API Book model
    """
    return api.Book(
        id=book.id,
        title=book.title,
        author=book.author,
        isbn=book.isbn,
        publication_date=book.publication_date,
        image_url=book.image_url,
    )


def api_book_to_domain(payload: api.BookIn) -> domain.Book:
    """
    Convert an API request body to a candidate domain Book.

    The payload id is dropped: the catalog decides ids.
    """
    return domain.Book(
        title=payload.title,
        author=payload.author,
        isbn=payload.isbn,
        publication_date=payload.publication_date,
        image_url=payload.image_url,
    )


def api_list_params_to_domain(
    search_query: str = "",
    year_filter: str = "all",
    sort_by: str = "title",
    sort_order: str = "asc",
    min_date: Optional[str] = None,
    max_date: Optional[str] = None,
) -> domain_vo.BookQuery:
    """
    Convert list query parameters to a domain BookQuery value object.

    Raises:
        ValueError: If minDate or maxDate cannot be parsed
    """
    return domain_vo.BookQuery(
        search_query=search_query or "",
        year_filter=year_filter or "all",
        sort_by=sort_by or "title",
        sort_order=sort_order or "asc",
        min_date=parse_date_param("minDate", min_date),
        max_date=parse_date_param("maxDate", max_date),
    )


def invalid_book_to_api(error: InvalidBookError) -> api.ErrorDetail:
    """Convert a rejected-book error to an API error detail."""
    return api.ErrorDetail(
        kind=error.result.kind.value,
        message=error.result.message,
        field=error.result.field,
    )


def not_found_to_api(error: BookNotFoundError) -> api.ErrorDetail:
    """Convert a missing-book error to an API error detail."""
    return api.ErrorDetail(kind=error.kind.value, message=error.message)
