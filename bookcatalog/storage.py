# bookcatalog/storage.py
import logging
from typing import Any, Dict, List, Optional

from .errors import CatalogExhaustedError
from .models import MAX_BOOK_ID, Book, Genre


logger = logging.getLogger(__name__)


class Catalog:
    """In-memory book collection plus the identifier counter.

    Not thread-safe: callers that share a Catalog between threads must
    serialise access themselves (see ``catalog.store.CatalogStore``).
    """

    def __init__(
        self,
        books: Optional[List[Book]] = None,
        next_id: int = 1,
        exhausted: bool = False,
    ):
        self.books: List[Book] = list(books or [])
        self.next_id = next_id
        # Set once MAX_BOOK_ID itself has been handed out.
        self.exhausted = exhausted

    def add(self, title: str, genre: Genre) -> int:
        if self.exhausted:
            raise CatalogExhaustedError(
                f"Identifier counter saturated at {MAX_BOOK_ID}; no new ids are available."
            )

        book_id = self.next_id
        book = Book(id=book_id, title=title, genre=genre)
        self.books.append(book)
        if self.next_id < MAX_BOOK_ID:
            self.next_id += 1
        else:
            self.exhausted = True
        logger.debug("Added book %d (%s)", book_id, book.genre.name)
        return book_id

    def list_books(self) -> List[Book]:
        return [b.model_copy() for b in self.books]

    def get(self, book_id: int) -> Optional[Book]:
        book = next((b for b in self.books if b.id == book_id), None)
        return book.model_copy() if book is not None else None

    def update(self, book_id: int, new_title: str, new_genre: Genre) -> bool:
        for index, book in enumerate(self.books):
            if book.id == book_id:
                # Validate before replacing so a bad genre leaves the book untouched
                self.books[index] = Book(id=book.id, title=new_title, genre=new_genre)
                logger.debug("Updated book %d", book_id)
                return True
        return False

    def remove(self, book_id: int) -> bool:
        for index, book in enumerate(self.books):
            if book.id == book_id:
                del self.books[index]
                logger.debug("Removed book %d", book_id)
                return True
        return False

    def __len__(self) -> int:
        return len(self.books)

    def snapshot(self) -> Dict[str, Any]:
        """Full catalog state as plain JSON-compatible data."""
        return {
            "next_id": self.next_id,
            "exhausted": self.exhausted,
            "books": [
                {"id": b.id, "title": b.title, "genre": int(b.genre)} for b in self.books
            ],
        }
