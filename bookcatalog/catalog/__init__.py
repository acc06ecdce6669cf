"""
Catalog package for the book catalog API.

This package wraps the in-memory ``Catalog`` for use behind HTTP: the
``schemas`` module defines the wire format (genres travel as integer
codes and are validated while the request is parsed), ``store``
persists the catalogue to a JSON file and serialises access to it, and
``router`` exposes the add/list/update/remove operations as REST
endpoints under ``/api/catalog``.
"""

from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore  # noqa: F401
