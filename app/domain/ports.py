"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

Following Hexagonal Architecture principles, the domain layer depends only
on these abstract protocols, never on concrete implementations.
"""

from datetime import datetime
from typing import List, Optional, Protocol

from .entities import Book


class BookCatalogRepository(Protocol):
    """
    Port for storing and retrieving books from the catalog.

    The repository trusts its callers: only records that already passed
    validation are handed to ``add`` and ``update``.
    """

    def get_all(self) -> List[Book]:
        """
        Retrieve all books in insertion order.

        Returns:
            A new list; mutating it does not affect the catalog
        """
        ...

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """
        Retrieve a book by its catalog id.

        Args:
            book_id: The catalog identifier

        Returns:
            The Book entity if found, None otherwise
        """
        ...

    def add(self, book: Book) -> Book:
        """
        Admit a new book, assigning it a fresh id.

        Any id already set on ``book`` is ignored.

        Args:
            book: The validated book to store

        Returns:
            The stored book, carrying its new id
        """
        ...

    def update(self, book_id: int, book: Book) -> Optional[Book]:
        """
        Replace every field of an existing book except its id.

        Args:
            book_id: The id of the book to replace
            book: The validated new field values

        Returns:
            The updated book, or None if no book has that id
        """
        ...

    def delete(self, book_id: int) -> bool:
        """
        Remove a book from the catalog.

        Args:
            book_id: The id of the book to remove

        Returns:
            True if a book existed and was removed
        """
        ...

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        ...


class Clock(Protocol):
    """Port for reading the current time, so date checks stay deterministic."""

    def now(self) -> datetime:
        """Current local time as a naive datetime."""
        ...
