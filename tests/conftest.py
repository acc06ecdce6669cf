"""
pytest fixtures for the book catalog tests.

- ``catalog``: a fresh in-memory ``Catalog`` per test.
- ``data_file``: path of a JSON catalog file inside ``tmp_path``
  (not created until something is committed).
- ``client``: a ``TestClient`` for an app whose store is bound to
  ``data_file``. Entering the client runs the application lifespan, so
  the store is loaded exactly as it would be at server startup.
"""

import json
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookcatalog.config import Settings
from bookcatalog.main import create_app
from bookcatalog.storage import Catalog


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "catalog.json"


@pytest.fixture
def write_state(data_file: Path):
    """Write a raw state document to ``data_file``."""

    def _write(state) -> Path:
        data_file.write_text(json.dumps(state), encoding="utf-8")
        return data_file

    return _write


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(data_file=data_file, log_level="DEBUG")


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_books(client: TestClient) -> list:
    """Add three books through the API and return the created records."""
    payloads = [
        {"title": "Livro A", "genre": 0},
        {"title": "Livro B", "genre": 2},
        {"title": "Livro C", "genre": 5},
    ]
    return [client.post("/api/catalog/books", json=p).json() for p in payloads]
