"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET    /books            : list every book in insertion order
- POST   /books            : add a book, the catalogue assigns its id
- GET    /books/{book_id}  : get one book by exact id
- PUT    /books/{book_id}  : replace the title and genre of a book
- DELETE /books/{book_id}  : remove a book
- GET    /genres           : list the genre codes accepted by the API
"""

from __future__ import annotations

import logging
from typing import List

from typing_extensions import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from ..models import MAX_BOOK_ID, Genre
from .schemas import BookIn, BookOut, GenreOut
from .store import CatalogStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])

BookId = Annotated[
    int, Path(ge=0, le=MAX_BOOK_ID, description="Catalogue identifier of the book")
]


def get_store(request: Request) -> CatalogStore:
    """Return the ``CatalogStore`` attached to the running application."""
    return request.app.state.store


def _not_found(book_id: int) -> HTTPException:
    logger.info("Book %d not found", book_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")


@router.get("/books", response_model=List[BookOut])
def list_books(store: CatalogStore = Depends(get_store)) -> List[BookOut]:
    return [BookOut.from_book(b) for b in store.list_books()]


@router.post("/books", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def add_book(payload: BookIn, store: CatalogStore = Depends(get_store)) -> BookOut:
    """Add a book and return it with its newly assigned id.

    A ``CatalogExhaustedError`` raised when the identifier counter is
    used up is turned into a 409 by the application exception handler.
    """
    book = store.add(payload.title, payload.genre)
    return BookOut.from_book(book)


@router.get("/books/{book_id}", response_model=BookOut)
def get_book(book_id: BookId, store: CatalogStore = Depends(get_store)) -> BookOut:
    book = store.get(book_id)
    if book is None:
        raise _not_found(book_id)
    return BookOut.from_book(book)


@router.put("/books/{book_id}", response_model=BookOut)
def update_book(
    payload: BookIn,
    book_id: BookId,
    store: CatalogStore = Depends(get_store),
) -> BookOut:
    """Replace the title and genre of an existing book.

    The id and the position of the book in listings do not change.
    """
    book = store.update(book_id, payload.title, payload.genre)
    if book is None:
        raise _not_found(book_id)
    return BookOut.from_book(book)


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(book_id: BookId, store: CatalogStore = Depends(get_store)) -> Response:
    if not store.remove(book_id):
        raise _not_found(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/genres", response_model=List[GenreOut])
def list_genres() -> List[GenreOut]:
    return [GenreOut(code=int(g), name=g.name) for g in Genre]
