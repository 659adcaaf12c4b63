"""
API endpoints for book catalog operations.

This module defines the FastAPI routes for listing, reading, creating,
updating and deleting books. It handles HTTP concerns and delegates to
the catalog service.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app.domain.errors import BookNotFoundError, InvalidBookError
from app.domain.ports import BookCatalogRepository
from app.domain.services import BookCatalogService
from app.api.v1 import schemas as api
from app.api.v1.converters import (
    api_book_to_domain,
    api_list_params_to_domain,
    domain_book_to_api,
    invalid_book_to_api,
    not_found_to_api,
)
from app.api.v1.dependencies import get_catalog_repository, get_catalog_service

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": api.ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": api.ErrorResponse},
}


def _not_found(error: BookNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=not_found_to_api(error).model_dump(),
    )


def _bad_request(error: InvalidBookError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=invalid_book_to_api(error).model_dump(),
    )


@router.get("/books", response_model=List[api.Book], responses=_ERROR_RESPONSES)
def list_books(
    search_query: str = Query(default="", alias="searchQuery", description="Text in title, author or ISBN"),
    year_filter: str = Query(default="all", alias="yearFilter", description="before2000, 2000-2010, after2010 or all"),
    sort_by: str = Query(default="title", alias="sortBy", description="title, author or date"),
    sort_order: str = Query(default="asc", alias="sortOrder", description="asc or desc"),
    min_date: Optional[str] = Query(default=None, alias="minDate", description="Earliest publication date"),
    max_date: Optional[str] = Query(default=None, alias="maxDate", description="Latest publication date"),
    service: BookCatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """
    List books, filtered and sorted.

    Filters apply in order: text search, date range, year bucket. Unknown
    year buckets and sort keys fall back to 'all' and 'title'.

    Raises:
        400: minDate or maxDate is not a date
    """
    try:
        query = api_list_params_to_domain(
            search_query=search_query,
            year_filter=year_filter,
            sort_by=sort_by,
            sort_order=sort_order,
            min_date=min_date,
            max_date=max_date,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=api.ErrorDetail(kind="InvalidFormat", message=str(e)).model_dump(),
        )

    return [domain_book_to_api(b) for b in service.list_books(query)]


@router.get("/books/{book_id}", response_model=api.Book, responses=_ERROR_RESPONSES)
def get_book_by_id(
    book_id: int,
    service: BookCatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Get a book by its catalog id.

    Raises:
        404: Book not found
    """
    try:
        book = service.get_book(book_id)
    except BookNotFoundError as e:
        raise _not_found(e)

    return domain_book_to_api(book)


@router.post(
    "/books",
    response_model=api.Book,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_book(
    payload: api.BookIn,
    request: Request,
    response: Response,
    service: BookCatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Add a book to the catalog. Any id in the body is ignored.

    Raises:
        400: The book failed validation (first failing rule reported)
    """
    try:
        created = service.create_book(api_book_to_domain(payload))
    except InvalidBookError as e:
        raise _bad_request(e)

    response.headers["Location"] = str(request.url_for("get_book_by_id", book_id=created.id))
    return domain_book_to_api(created)


@router.put("/books/{book_id}", response_model=api.Book, responses=_ERROR_RESPONSES)
def update_book(
    book_id: int,
    payload: api.BookIn,
    service: BookCatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Replace a book's fields. The id in the path wins over any id in the body.

    Raises:
        404: Book not found (checked before validation)
        400: The book failed validation
    """
    try:
        updated = service.update_book(book_id, api_book_to_domain(payload))
    except BookNotFoundError as e:
        raise _not_found(e)
    except InvalidBookError as e:
        raise _bad_request(e)

    return domain_book_to_api(updated)


@router.delete(
    "/books/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_book(
    book_id: int,
    service: BookCatalogService = Depends(get_catalog_service),
) -> Response:
    """
    Remove a book from the catalog.

    Raises:
        404: Book not found
    """
    try:
        service.delete_book(book_id)
    except BookNotFoundError as e:
        raise _not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health", response_model=api.HealthResponse)
def health_check(
    catalog_repo: BookCatalogRepository = Depends(get_catalog_repository),
) -> api.HealthResponse:
    """Report that the service is up and how many books it holds."""
    return api.HealthResponse(status="ok", books=catalog_repo.count())
