"""
Tests for the books HTTP API.

Each test gets its own seeded catalog and a frozen clock, wired in through
FastAPI dependency overrides.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.api.v1.converters import parse_date_param
from app.api.v1.dependencies import get_catalog_repository, get_catalog_service
from app.domain.services import BookCatalogService
from app.infrastructure.db.in_memory_book_catalog_repository import InMemoryBookCatalogRepository
from app.infrastructure.db.sample_books import sample_books
from app.main import app


class FixedClock:
    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment


NOW = datetime(2024, 3, 15, 12, 0, 0)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def repo():
    """The twelve sample classics, ids 1-12."""
    return InMemoryBookCatalogRepository(sample_books())


@pytest.fixture
def client(repo):
    service = BookCatalogService(catalog_repo=repo, clock=FixedClock(NOW))
    app.dependency_overrides[get_catalog_repository] = lambda: repo
    app.dependency_overrides[get_catalog_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def new_book():
    return {
        "title": "Brave New World",
        "author": "Aldous Huxley",
        "isbn": "978-0060850524",
        "publicationDate": "1932-01-01",
        "imageUrl": "https://covers.openlibrary.org/b/isbn/9780060850524-L.jpg",
    }


# ============================================================================
# LIST
# ============================================================================

class TestListBooks:
    """GET /api/books"""

    def test_defaults_sort_by_title(self, client):
        resp = client.get("/api/books")

        assert resp.status_code == 200
        titles = [b["title"] for b in resp.json()]
        assert len(titles) == 12
        assert titles == sorted(titles)

    def test_camel_case_fields(self, client):
        book = client.get("/api/books", params={"searchQuery": "odyssey"}).json()[0]

        assert book == {
            "id": 12,
            "title": "The Odyssey",
            "author": "Homer",
            "isbn": "978-0143109280",
            "publicationDate": "1488-01-01T00:00:00",
            "imageUrl": "https://covers.openlibrary.org/b/isbn/9780143109280-L.jpg",
        }

    @pytest.mark.parametrize("query", ["tolkien", "TOLKIEN"])
    def test_search_ignores_case(self, client, query):
        resp = client.get("/api/books", params={"searchQuery": query})

        assert sorted(b["title"] for b in resp.json()) == ["The Hobbit", "The Lord of the Rings"]

    def test_sort_by_date_desc(self, client):
        resp = client.get("/api/books", params={"sortBy": "date", "sortOrder": "desc"})

        dates = [b["publicationDate"] for b in resp.json()]
        assert dates[0].startswith("1960")
        assert dates[-1].startswith("1488")

    def test_date_range(self, client):
        resp = client.get("/api/books", params={"minDate": "1925-04-10", "maxDate": "1949-06-08", "sortBy": "date"})

        assert [b["title"] for b in resp.json()] == ["The Great Gatsby", "The Hobbit", "1984"]

    def test_year_filter_after2010_is_empty_for_classics(self, client):
        resp = client.get("/api/books", params={"yearFilter": "after2010"})

        assert resp.json() == []

    def test_unknown_sort_key_falls_back_to_title(self, client):
        by_rating = client.get("/api/books", params={"sortBy": "rating"}).json()
        by_title = client.get("/api/books", params={"sortBy": "title"}).json()

        assert by_rating == by_title

    def test_unparseable_date_is_bad_request(self, client):
        resp = client.get("/api/books", params={"minDate": "last tuesday"})

        assert resp.status_code == 400
        assert "minDate" in resp.json()["detail"]["message"]

    def test_date_with_offset_is_accepted(self, client):
        resp = client.get("/api/books", params={"minDate": "1940-01-01T12:00:00+00:00"})

        assert resp.status_code == 200
        titles = [b["title"] for b in resp.json()]
        assert "1984" in titles
        assert "The Odyssey" not in titles


# ============================================================================
# GET
# ============================================================================

class TestGetBook:
    """GET /api/books/{id}"""

    def test_existing(self, client):
        resp = client.get("/api/books/3")

        assert resp.status_code == 200
        assert resp.json()["title"] == "1984"

    def test_missing(self, client):
        resp = client.get("/api/books/404")

        assert resp.status_code == 404
        assert resp.json()["detail"] == {
            "kind": "NotFound",
            "message": "Book with ID 404 not found",
            "field": None,
        }


# ============================================================================
# CREATE
# ============================================================================

class TestCreateBook:
    """POST /api/books"""

    def test_created(self, client, new_book):
        resp = client.post("/api/books", json=new_book)

        assert resp.status_code == 201
        data = resp.json()
        assert data["id"] == 13
        assert data["publicationDate"] == "1932-01-01T00:00:00"
        assert resp.headers["location"].endswith("/api/books/13")

    def test_client_id_ignored(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "id": 1})

        assert resp.json()["id"] == 13
        assert client.get("/api/books/1").json()["title"] == "The Great Gatsby"

    def test_short_isbn_is_invalid_length(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "isbn": "123"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == {
            "kind": "InvalidLength",
            "message": "ISBN must be exactly 10 or 13 digits",
            "field": "isbn",
        }

    def test_second_create_is_duplicate(self, client, new_book):
        assert client.post("/api/books", json=new_book).status_code == 201

        resp = client.post("/api/books", json=new_book)

        assert resp.status_code == 400
        assert resp.json()["detail"]["kind"] == "DuplicateIsbn"

    def test_seeded_isbn_without_hyphen_is_duplicate(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "isbn": "9780143109280"})

        assert resp.json()["detail"]["kind"] == "DuplicateIsbn"

    def test_missing_title_is_required_field(self, client, new_book):
        del new_book["title"]

        resp = client.post("/api/books", json=new_book)

        assert resp.status_code == 400
        assert resp.json()["detail"]["kind"] == "RequiredField"
        assert resp.json()["detail"]["field"] == "title"

    def test_future_date(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "publicationDate": "2024-03-16"})

        assert resp.json()["detail"]["kind"] == "FutureDate"

    def test_too_old(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "publicationDate": "1449-12-31"})

        assert resp.json()["detail"]["kind"] == "TooOld"

    def test_missing_publication_date_is_schema_error(self, client, new_book):
        del new_book["publicationDate"]

        resp = client.post("/api/books", json=new_book)

        assert resp.status_code == 422

    def test_accepts_full_iso_datetime(self, client, new_book):
        resp = client.post("/api/books", json={**new_book, "publicationDate": "1932-01-01T09:30:00"})

        assert resp.status_code == 201
        assert resp.json()["publicationDate"] == "1932-01-01T09:30:00"


# ============================================================================
# UPDATE
# ============================================================================

class TestUpdateBook:
    """PUT /api/books/{id}"""

    def test_unchanged_isbn_succeeds(self, client):
        book = client.get("/api/books/9").json()
        book["title"] = "The Hobbit, or There and Back Again"

        resp = client.put("/api/books/9", json=book)

        assert resp.status_code == 200
        assert resp.json()["title"] == "The Hobbit, or There and Back Again"
        assert resp.json()["id"] == 9

    def test_path_id_wins_over_body_id(self, client):
        book = client.get("/api/books/9").json()
        book["id"] = 3

        resp = client.put("/api/books/9", json=book)

        assert resp.json()["id"] == 9
        assert client.get("/api/books/3").json()["title"] == "1984"

    def test_other_books_isbn_is_duplicate(self, client):
        book = client.get("/api/books/9").json()
        book["isbn"] = "9780451524935"

        resp = client.put("/api/books/9", json=book)

        assert resp.status_code == 400
        assert resp.json()["detail"]["kind"] == "DuplicateIsbn"

    def test_missing_is_not_found(self, client, new_book):
        resp = client.put("/api/books/99", json=new_book)

        assert resp.status_code == 404


# ============================================================================
# DELETE
# ============================================================================

class TestDeleteBook:
    """DELETE /api/books/{id}"""

    def test_deleted(self, client):
        resp = client.delete("/api/books/1")

        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get("/api/books/1").status_code == 404

    def test_missing(self, client):
        resp = client.delete("/api/books/99")

        assert resp.status_code == 404
        assert resp.json()["detail"]["kind"] == "NotFound"


# ============================================================================
# MISC
# ============================================================================

class TestHealthAndRoot:

    def test_health_counts_books(self, client):
        resp = client.get("/api/health")

        assert resp.json() == {"status": "ok", "books": 12}

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


# ============================================================================
# QUERY PARAMETER PARSING
# ============================================================================

class TestParseDateParam:
    """Tests for the minDate/maxDate converter."""

    def test_offset_is_folded_into_local_time(self):
        aware = datetime(1925, 4, 10, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        parsed = parse_date_param("minDate", "1925-04-10T12:00:00+02:00")

        assert parsed.tzinfo is None
        assert parsed == aware.astimezone().replace(tzinfo=None)

    def test_naive_value_kept_as_given(self):
        assert parse_date_param("minDate", "1925-04-10T08:30:00") == datetime(1925, 4, 10, 8, 30)

    @pytest.mark.parametrize("raw, expected", [("1925-04", datetime(1925, 4, 1)), ("1925", datetime(1925, 1, 1))])
    def test_partial_dates(self, raw, expected):
        assert parse_date_param("maxDate", raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_means_absent(self, raw):
        assert parse_date_param("maxDate", raw) is None
