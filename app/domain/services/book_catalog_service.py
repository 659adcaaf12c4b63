"""
Domain service for the book catalog use cases.

The service sits between the HTTP layer and the catalog repository:

    request --> validate_book (pure) --> repository mutation

It owns the two decisions the pure engines cannot make on their own:
which id (if any) to exclude from the ISBN uniqueness check, and when a
missing id short-circuits the operation. Validation and the mutation
that follows it run under one lock, so two concurrent creates carrying
the same ISBN cannot both pass the uniqueness check.
"""

import logging
import threading
from typing import List, Optional

from app.domain.entities import Book
from app.domain.errors import BookNotFoundError, InvalidBookError
from app.domain.ports import BookCatalogRepository, Clock
from app.domain.query import list_books
from app.domain.validation import validate_book
from app.domain.value_objects import BookQuery

logger = logging.getLogger(__name__)


class BookCatalogService:
    """
    Orchestrates list/get/create/update/delete over the catalog.

    Usage:
        service = BookCatalogService(
            catalog_repo=InMemoryBookCatalogRepository(),
            clock=SystemClock(),
        )
        book = service.create_book(candidate)
    """

    def __init__(self, catalog_repo: BookCatalogRepository, clock: Clock) -> None:
        """
        Initialize the service with its ports.

        Args:
            catalog_repo: Store holding the catalog
            clock: Source of "now" for publication date checks
        """
        self._catalog_repo = catalog_repo
        self._clock = clock
        self._write_lock = threading.Lock()

    def list_books(self, query: BookQuery) -> List[Book]:
        """Filter and sort a snapshot of the catalog."""
        books = list_books(
            self._catalog_repo.get_all(),
            search_query=query.search_query,
            min_date=query.min_date,
            max_date=query.max_date,
            year_filter=query.year_filter,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        if query.has_date_range():
            date_range = f"{query.min_date or ''}..{query.max_date or ''}"
        else:
            date_range = "any"
        logger.debug(
            "Listed %d books (search=%r, year=%s, range=%s, sort=%s %s)",
            len(books),
            query.search_query,
            query.year_filter,
            date_range,
            query.sort_by,
            query.sort_order,
        )
        return books

    def get_book(self, book_id: int) -> Book:
        """
        Retrieve a book by id.

        Raises:
            BookNotFoundError: If no book has that id
        """
        book = self._catalog_repo.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def create_book(self, book: Book) -> Book:
        """
        Validate and admit a new book. Any id on ``book`` is ignored.

        Raises:
            InvalidBookError: If the record fails validation
        """
        logger.info(
            "Create book request: %s (image length: %d)",
            book.title,
            len(book.image_url or ""),
        )

        with self._write_lock:
            self._ensure_valid(book)
            created = self._catalog_repo.add(book)

        logger.info("Created book %d: %s", created.id, created.title)
        return created

    def update_book(self, book_id: int, book: Book) -> Book:
        """
        Replace every field of an existing book except its id.

        The book's own id is excluded from the ISBN uniqueness check, so
        saving it with an unchanged ISBN never conflicts with itself.

        Raises:
            BookNotFoundError: If no book has that id (checked first)
            InvalidBookError: If the record fails validation
        """
        with self._write_lock:
            if self._catalog_repo.get_by_id(book_id) is None:
                logger.warning("Update rejected: book %d not found", book_id)
                raise BookNotFoundError(book_id)

            self._ensure_valid(book, exclude_id=book_id)
            updated = self._catalog_repo.update(book_id, book)

        if updated is None:
            raise BookNotFoundError(book_id)

        logger.info("Updated book %d: %s", updated.id, updated.title)
        return updated

    def delete_book(self, book_id: int) -> None:
        """
        Remove a book from the catalog.

        Raises:
            BookNotFoundError: If nothing was removed
        """
        with self._write_lock:
            deleted = self._catalog_repo.delete(book_id)

        if not deleted:
            logger.warning("Delete rejected: book %d not found", book_id)
            raise BookNotFoundError(book_id)

        logger.info("Deleted book %d", book_id)

    def _ensure_valid(self, book: Book, exclude_id: Optional[int] = None) -> None:
        error = validate_book(
            book,
            self._catalog_repo.get_all(),
            self._clock.now(),
            exclude_id=exclude_id,
        )
        if error is not None:
            logger.warning("Book rejected (%s): %s", error.kind.value, error.message)
            raise InvalidBookError(error)
