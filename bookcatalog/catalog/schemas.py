"""
Pydantic schema definitions for the catalog module.

Two groups of models live here. The request/response models
(``BookIn``, ``BookOut`` and ``GenreOut``) describe what travels over
HTTP: genres are exchanged as their integer code, and an incoming
code is decoded with :func:`~bookcatalog.models.decode_genre` while
the request is parsed, so an out-of-range code is rejected with a 422
before any route code runs. ``CatalogState`` describes the JSON
document written by the store and checks that a loaded document
respects the catalog invariants.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models import MAX_BOOK_ID, Book, Genre, decode_genre


class BookIn(BaseModel):
    """Payload for creating or replacing a book."""

    title: str = Field(description="Book title; any text is accepted")
    genre: Genre = Field(description="Genre code from 0 (Fiction) to 5 (Other)")

    @field_validator("genre", mode="before")
    @classmethod
    def _decode_genre(cls, v):
        return decode_genre(v)


class BookOut(BaseModel):
    id: int
    title: str
    genre: int
    genre_name: str

    @classmethod
    def from_book(cls, book: Book) -> "BookOut":
        return cls(
            id=book.id,
            title=book.title,
            genre=int(book.genre),
            genre_name=book.genre.name,
        )


class GenreOut(BaseModel):
    code: int
    name: str


class StoredBook(BaseModel):
    id: int = Field(ge=1, le=MAX_BOOK_ID)
    title: str
    genre: Genre

    @field_validator("genre", mode="before")
    @classmethod
    def _decode_genre(cls, v):
        return decode_genre(v)


class CatalogState(BaseModel):
    """The full persisted state of a catalog.

    Validation rejects documents that would break the catalog
    invariants once loaded: duplicate ids, or a counter that is not
    strictly greater than every stored id. When ``exhausted`` is set the
    counter must sit at ``MAX_BOOK_ID`` and that id may be in use.
    """

    next_id: int = Field(default=1, ge=1, le=MAX_BOOK_ID)
    exhausted: bool = False
    books: List[StoredBook] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_invariants(self) -> "CatalogState":
        ids = [b.id for b in self.books]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate book ids in catalog state")
        if self.exhausted and self.next_id != MAX_BOOK_ID:
            raise ValueError("exhausted catalog state must have next_id at the maximum id")
        bound = MAX_BOOK_ID + 1 if self.exhausted else self.next_id
        if ids and max(ids) >= bound:
            raise ValueError(f"next_id {self.next_id} is not above every stored id")
        return self
