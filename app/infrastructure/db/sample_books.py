"""
Starting catalog served when the process boots with seeding enabled.
"""

from datetime import datetime
from typing import List

from app.domain.entities import Book

_COVERS_URL = "https://covers.openlibrary.org/b/isbn/{}-L.jpg"


def _classic(title: str, author: str, isbn: str, published: datetime) -> Book:
    return Book(
        title=title,
        author=author,
        isbn=isbn,
        publication_date=published,
        image_url=_COVERS_URL.format(isbn.replace("-", "")),
    )


def sample_books() -> List[Book]:
    """Twelve classics, in the order they receive ids 1-12."""
    return [
        _classic("The Great Gatsby", "F. Scott Fitzgerald", "978-0743273565", datetime(1925, 4, 10)),
        _classic("To Kill a Mockingbird", "Harper Lee", "978-0061120084", datetime(1960, 7, 11)),
        _classic("1984", "George Orwell", "978-0451524935", datetime(1949, 6, 8)),
        _classic("Pride and Prejudice", "Jane Austen", "978-0141439518", datetime(1813, 1, 28)),
        _classic("The Catcher in the Rye", "J.D. Salinger", "978-0316769174", datetime(1951, 7, 16)),
        _classic("Jane Eyre", "Charlotte Brontë", "978-0141441146", datetime(1847, 10, 16)),
        _classic("The Lord of the Rings", "J.R.R. Tolkien", "978-0544003415", datetime(1954, 7, 29)),
        _classic("Moby-Dick", "Herman Melville", "978-0142437247", datetime(1851, 10, 18)),
        _classic("The Hobbit", "J.R.R. Tolkien", "978-0547928227", datetime(1937, 9, 21)),
        _classic("Wuthering Heights", "Emily Brontë", "978-0141439556", datetime(1847, 12, 19)),
        _classic("The Picture of Dorian Gray", "Oscar Wilde", "978-0141439570", datetime(1890, 7, 1)),
        _classic("The Odyssey", "Homer", "978-0143109280", datetime(1488, 1, 1)),
    ]
