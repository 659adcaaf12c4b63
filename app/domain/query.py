"""
Filtering and sorting of the catalog for listing.

``list_books`` runs four stages over a catalog snapshot, each consuming
the previous stage's output:

1. text search over title, author and ISBN
2. publication date range (calendar days, time of day ignored)
3. legacy year bucket
4. stable sort by title, author or date

Unknown year buckets, sort keys and sort orders fall back to defaults
instead of failing. The input collection is never mutated.
"""

from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from .entities import Book, as_datetime

DEFAULT_SORT_KEY = "title"

_YEAR_BUCKETS: Dict[str, Callable[[int], bool]] = {
    "before2000": lambda year: year < 2000,
    "2000-2010": lambda year: 2000 <= year <= 2010,
    "after2010": lambda year: year > 2010,
}

_SORT_KEYS: Dict[str, Callable[[Book], object]] = {
    "title": lambda book: book.title,
    "author": lambda book: book.author,
    "date": lambda book: as_datetime(book.publication_date),
}


def _day(value: date) -> date:
    return as_datetime(value).date()


def search_books(books: Iterable[Book], search_query: Optional[str]) -> List[Book]:
    """Keep books whose title, author or ISBN contains the query, ignoring case."""
    needle = (search_query or "").strip().lower()
    if not needle:
        return list(books)

    return [
        book for book in books
        if needle in book.title.lower()
        or needle in book.author.lower()
        or needle in book.isbn.lower()
    ]


def filter_by_date_range(
    books: Iterable[Book],
    min_date: Optional[date] = None,
    max_date: Optional[date] = None,
) -> List[Book]:
    """Keep books published between the two days, both inclusive."""
    items = list(books)

    if min_date is not None:
        lower = _day(min_date)
        items = [b for b in items if b.get_publication_day() >= lower]

    if max_date is not None:
        upper = _day(max_date)
        items = [b for b in items if b.get_publication_day() <= upper]

    return items


def filter_by_year_bucket(books: Iterable[Book], year_filter: Optional[str]) -> List[Book]:
    """
    Apply the legacy year bucket.

    'before2000', '2000-2010' (inclusive) and 'after2010' are matched
    case-insensitively; 'all' or anything else keeps every book.
    """
    in_bucket = _YEAR_BUCKETS.get((year_filter or "").strip().lower())
    if in_bucket is None:
        return list(books)
    return [b for b in books if in_bucket(b.get_published_year())]


def sort_books(
    books: Iterable[Book],
    sort_by: Optional[str] = DEFAULT_SORT_KEY,
    sort_order: Optional[str] = "asc",
) -> List[Book]:
    """
    Sort by 'title', 'author' or 'date', falling back to 'title'.

    Descending only when ``sort_order`` is 'desc' (any case). The sort is
    stable in both directions: books with equal keys keep the order they
    arrived in.
    """
    key = _SORT_KEYS.get((sort_by or "").strip().lower(), _SORT_KEYS[DEFAULT_SORT_KEY])
    descending = (sort_order or "").strip().lower() == "desc"
    return sorted(books, key=key, reverse=descending)


def list_books(
    collection: Iterable[Book],
    search_query: Optional[str] = "",
    min_date: Optional[date] = None,
    max_date: Optional[date] = None,
    year_filter: Optional[str] = "all",
    sort_by: Optional[str] = DEFAULT_SORT_KEY,
    sort_order: Optional[str] = "asc",
) -> List[Book]:
    """
    Filter and sort a catalog snapshot for listing.

    Args:
        collection: Books in catalog (insertion) order
        search_query: Substring to look for in title, author or ISBN
        min_date: Earliest publication day, inclusive
        max_date: Latest publication day, inclusive
        year_filter: Legacy year bucket name
        sort_by: 'title', 'author' or 'date'
        sort_order: 'asc' or 'desc'

    Returns:
        A new, ordered list of books
    """
    items = search_books(collection, search_query)
    items = filter_by_date_range(items, min_date, max_date)
    items = filter_by_year_bucket(items, year_filter)
    return sort_books(items, sort_by, sort_order)
