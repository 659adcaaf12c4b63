"""
Exceptions raised by the catalog service.

Validation itself never raises. These wrap its outcome at the use-case
boundary so the API layer can map them onto HTTP status codes.
"""

from .value_objects import ValidationErrorKind, ValidationResult


class BookNotFoundError(LookupError):
    """No book with the requested id exists in the catalog."""

    kind = ValidationErrorKind.NOT_FOUND

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        self.message = f"Book with ID {book_id} not found"
        super().__init__(self.message)


class InvalidBookError(ValueError):
    """A book record failed validation; ``result`` holds the first failure."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__(result.message)

    @property
    def kind(self) -> ValidationErrorKind:
        return self.result.kind
