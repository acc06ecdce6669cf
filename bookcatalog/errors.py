"""Exception classes for the book catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidGenreCodeError(CatalogError, ValueError):
    """Raised when a raw genre code does not map to a known genre."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Invalid genre code: {code!r} (expected an integer from 0 to 5)")


class CatalogExhaustedError(CatalogError):
    """Raised when the identifier counter is saturated and its last id was already issued."""


class CatalogStateError(CatalogError):
    """Raised when persisted catalog state cannot be loaded."""
