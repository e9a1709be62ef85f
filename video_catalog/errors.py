"""Error types raised by the catalog and mapped to HTTP responses by the web layer."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidRequestError(CatalogError):
    """User-correctable input problem (bad URL, missing parameter). Maps to 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StorageError(CatalogError):
    """The video store could not list or persist records. Maps to 500."""


class ThumbnailProxyError(CatalogError):
    """Fetching the upstream thumbnail failed. Maps to 500."""
