"""Exceptions raised by catalog lookups and registration."""


class CatalogException(Exception):
    """Base exception for catalog operations."""


class NotFoundError(CatalogException):
    """Raised when a member or item is not in the catalog."""


class DuplicateError(CatalogException):
    """Raised when registering an identifier the catalog already holds."""
