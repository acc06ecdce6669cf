"""
Persistent host for the in-memory :class:`~bookcatalog.storage.Catalog`.

The catalog itself knows nothing about files or threads. ``CatalogStore``
supplies both: it loads the full catalog state from a JSON file before
the first operation, writes the full state back after every operation
that changed it, and runs every operation under a single
``threading.Lock`` so that concurrent requests are applied one at a time.

When no data file is configured the store keeps the catalog in memory
only, which is what the tests and throwaway dev servers use.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from ..errors import CatalogStateError
from ..models import Book, Genre
from ..storage import Catalog
from .schemas import CatalogState


logger = logging.getLogger(__name__)


def _read_state(path: Path) -> CatalogState:
    """Read and validate the catalogue state stored at ``path``.

    Parameters
    ----------
    path : Path
        Location of the JSON document.

    Returns
    -------
    CatalogState
        The validated state, or an empty state when the file does not
        exist yet.

    Raises
    ------
    CatalogStateError
        If the file cannot be read, is not valid JSON, or describes a
        catalogue that breaks the identifier invariants.
    """
    if not path.exists():
        logger.info("No catalog file at %s, starting empty", path)
        return CatalogState()
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return CatalogState.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise CatalogStateError(f"Cannot load catalog state from {path}: {exc}") from exc


def _write_state(path: Path, state: dict) -> None:
    """Write ``state`` to ``path`` through a temporary file.

    ``os.replace`` swaps the file in one step so readers never see a
    partially written document.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=2)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


class CatalogStore:
    """Thread-safe, optionally file-backed front end to a ``Catalog``."""

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        self.data_file = Path(data_file) if data_file else None
        self._catalog: Optional[Catalog] = None
        self._lock = threading.Lock()

    def load(self) -> None:
        """Load the catalogue now instead of on first use."""
        with self._lock:
            self._ensure_loaded()

    def _ensure_loaded(self) -> Catalog:
        if self._catalog is None:
            if self.data_file is None:
                self._catalog = Catalog()
            else:
                state = _read_state(self.data_file)
                self._catalog = Catalog(
                    books=[Book(id=b.id, title=b.title, genre=b.genre) for b in state.books],
                    next_id=state.next_id,
                    exhausted=state.exhausted,
                )
                logger.info(
                    "Loaded %d books from %s (next id %d)",
                    len(self._catalog),
                    self.data_file,
                    self._catalog.next_id,
                )
        return self._catalog

    def _commit(self, catalog: Catalog) -> None:
        if self.data_file is None:
            return
        _write_state(self.data_file, catalog.snapshot())
        logger.debug("Committed %d books to %s", len(catalog), self.data_file)

    def add(self, title: str, genre: Genre) -> Book:
        with self._lock:
            catalog = self._ensure_loaded()
            book_id = catalog.add(title, genre)
            self._commit(catalog)
            return catalog.get(book_id)

    def list_books(self) -> List[Book]:
        with self._lock:
            return self._ensure_loaded().list_books()

    def get(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._ensure_loaded().get(book_id)

    def update(self, book_id: int, title: str, genre: Genre) -> Optional[Book]:
        """Update a book and return its new state, or ``None`` if the id is unknown."""
        with self._lock:
            catalog = self._ensure_loaded()
            if not catalog.update(book_id, title, genre):
                return None
            self._commit(catalog)
            return catalog.get(book_id)

    def remove(self, book_id: int) -> bool:
        with self._lock:
            catalog = self._ensure_loaded()
            found = catalog.remove(book_id)
            if found:
                self._commit(catalog)
            return found

    def count(self) -> int:
        with self._lock:
            return len(self._ensure_loaded())
