# bookcatalog/models.py
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidGenreCodeError


# Largest identifier representable as an unsigned 32-bit integer.
MAX_BOOK_ID = 2**32 - 1


class Genre(IntEnum):
    FICTION = 0
    BIOGRAPHY = 1
    POETRY = 2
    CHILDREN = 3
    ROMANCE = 4
    OTHER = 5


def decode_genre(code: Any) -> Genre:
    """Turn a raw integer code into a Genre, rejecting anything outside 0-5."""
    if isinstance(code, Genre):
        return code
    # bool is an int subclass; True must not decode to BIOGRAPHY
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidGenreCodeError(code)
    try:
        return Genre(code)
    except ValueError:
        raise InvalidGenreCodeError(code) from None


class Book(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1, le=MAX_BOOK_ID)
    title: str
    genre: Genre
