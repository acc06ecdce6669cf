"""Book catalog service: an id-stamping book collection behind a small REST API."""

from .errors import (  # noqa: F401
    CatalogError,
    CatalogExhaustedError,
    CatalogStateError,
    InvalidGenreCodeError,
)
from .models import MAX_BOOK_ID, Book, Genre, decode_genre  # noqa: F401
from .storage import Catalog  # noqa: F401

__version__ = "1.0.0"
