"""
Domain layer - Core business logic and entities.

This layer contains the book entity, the validation and query engines,
and defines the ports (interfaces) that the infrastructure layer must
implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book, normalize_isbn
from .errors import BookNotFoundError, InvalidBookError
from .value_objects import BookQuery, ValidationErrorKind, ValidationResult

__all__ = [
    # Entities
    "Book",
    "normalize_isbn",
    # Value Objects
    "BookQuery",
    "ValidationErrorKind",
    "ValidationResult",
    # Errors
    "BookNotFoundError",
    "InvalidBookError",
]
