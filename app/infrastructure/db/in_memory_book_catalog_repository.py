"""
In-memory implementation of the BookCatalogRepository port.

This adapter keeps Book entities in a plain list, in insertion order,
and hands out ids from a monotonic counter so a deleted book's id is
never reused. Nothing survives a restart.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from app.domain.entities import Book
from app.domain.ports import BookCatalogRepository

logger = logging.getLogger(__name__)


class InMemoryBookCatalogRepository(BookCatalogRepository):
    """
    Books are stored as given; the repository does not validate them.
    Callers (the catalog service) admit only validated records. Reads and
    writes hand back copies, so a returned Book never aliases a stored one.
    """

    def __init__(self, initial_books: Optional[Iterable[Book]] = None) -> None:
        """
        Initialize the repository, optionally admitting a starting catalog.

        Each initial book goes through ``add``, so it receives the next id
        in sequence regardless of any id it already carries.
        """
        self._books: List[Book] = []
        self._next_id = 1

        if initial_books is not None:
            for book in initial_books:
                self.add(book)
            logger.info("Seeded catalog with %d books", len(self._books))

    def _index_of(self, book_id: int) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        return len(self._books)

    def get_all(self) -> List[Book]:
        """Retrieve all books in insertion order."""
        return [replace(book) for book in self._books]

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Retrieve a book by its catalog id."""
        index = self._index_of(book_id)
        if index is None:
            return None
        return replace(self._books[index])

    def add(self, book: Book) -> Book:
        """Store a book under a fresh id, ignoring any id it carries."""
        stored = book.with_id(self._next_id)
        self._next_id += 1
        self._books.append(stored)
        logger.debug("Added book %d (%s)", stored.id, stored.isbn)
        return replace(stored)

    def update(self, book_id: int, book: Book) -> Optional[Book]:
        """Replace all fields of a book except its id, keeping its position."""
        index = self._index_of(book_id)
        if index is None:
            return None

        stored = book.with_id(book_id)
        self._books[index] = stored
        logger.debug("Updated book %d", book_id)
        return replace(stored)

    def delete(self, book_id: int) -> bool:
        """Delete a book from the catalog. Returns True if deleted."""
        index = self._index_of(book_id)
        if index is None:
            return False

        del self._books[index]
        logger.debug("Deleted book %d", book_id)
        return True
