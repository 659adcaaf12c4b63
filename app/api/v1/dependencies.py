"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the repository, clock and
service for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

import os
from typing import Optional

from app.domain.ports import BookCatalogRepository, Clock
from app.domain.services import BookCatalogService
from app.infrastructure.clock import SystemClock
from app.infrastructure.db.in_memory_book_catalog_repository import InMemoryBookCatalogRepository
from app.infrastructure.db.sample_books import sample_books

# Configuration from environment
SEED_SAMPLE_BOOKS = os.getenv("SEED_SAMPLE_BOOKS", "true").strip().lower() not in ("0", "false", "no")

# Module-level singletons (initialized lazily)
_catalog_repository: Optional[BookCatalogRepository] = None
_clock: Optional[Clock] = None
_catalog_service: Optional[BookCatalogService] = None


def get_catalog_repository() -> BookCatalogRepository:
    """Provide a singleton instance of the catalog repository."""
    global _catalog_repository
    if _catalog_repository is None:
        initial = sample_books() if SEED_SAMPLE_BOOKS else None
        _catalog_repository = InMemoryBookCatalogRepository(initial)
    return _catalog_repository


def get_clock() -> Clock:
    """Provide a singleton instance of the system clock."""
    global _clock
    if _clock is None:
        _clock = SystemClock()
    return _clock


def get_catalog_service() -> BookCatalogService:
    """Provide the catalog service with all dependencies wired."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = BookCatalogService(
            catalog_repo=get_catalog_repository(),
            clock=get_clock(),
        )
    return _catalog_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to start from a freshly seeded catalog between
    test cases.
    """
    global _catalog_repository, _clock, _catalog_service

    _catalog_repository = None
    _clock = None
    _catalog_service = None
