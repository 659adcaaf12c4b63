"""
Request and response bodies for the books API.

Field names go over the wire in camelCase (``publicationDate``,
``imageUrl``), the shape the catalog frontend reads and writes.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookIn(BaseModel):
    """
    Request body for POST /books and PUT /books/{id}.

    Text fields may be missing or blank here; the validation engine turns
    that into a RequiredField error instead of a schema error. ``id`` is
    accepted but ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, description="Ignored; the catalog assigns ids")
    title: str | None = Field(default=None, description="Book title (2-100 characters)")
    author: str | None = Field(default=None, description="Author name (2-50 characters)")
    isbn: str | None = Field(default=None, description="10 or 13 digits, hyphens allowed")
    publication_date: datetime = Field(
        alias="publicationDate",
        description="Publication date, YYYY-MM-DD or ISO-8601 datetime",
    )
    image_url: str | None = Field(
        default=None,
        alias="imageUrl",
        description="Cover URL or data URI",
    )

    @field_validator("publication_date", mode="before")
    @classmethod
    def parse_publication_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
        return value

    @field_validator("publication_date")
    @classmethod
    def drop_timezone(cls, value: datetime) -> datetime:
        # Stored dates are naive local time, like the clock
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class Book(BaseModel):
    """
    API representation of a Book entity.

    Maps from the domain Book entity for API responses.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Catalog identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    isbn: str = Field(description="ISBN as entered, hyphens included")
    publication_date: datetime = Field(alias="publicationDate", description="Publication date")
    image_url: str | None = Field(default=None, alias="imageUrl", description="Cover URL or data URI")


class ErrorDetail(BaseModel):
    """Why a request was rejected."""
    kind: str = Field(description="Error kind, e.g. 'DuplicateIsbn' or 'NotFound'")
    message: str = Field(description="Human-readable message")
    field: str | None = Field(default=None, description="Offending field, if any")


class ErrorResponse(BaseModel):
    """Error body (FastAPI wraps HTTPException details under 'detail')."""
    detail: ErrorDetail


class HealthResponse(BaseModel):
    status: str
    books: int = Field(ge=0, description="Number of books in the catalog")
