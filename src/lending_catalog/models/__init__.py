"""
Lending Catalog Models.

This package contains the Pydantic models for the lending catalog:

- Items: Book, Magazine, DVD, Newspaper and Thesis, unified by ``CatalogItem``
- Member: a borrower and the items it currently holds
- LendingResult: the outcome of every borrow and return
"""

from .item import DVD, Book, CatalogItem, ItemKind, LibraryItem, Magazine, Newspaper, Thesis
from .member import Member
from .result import LendingResult, LendingStatus, NotFoundKind

__all__ = [
    "DVD",
    "Book",
    "CatalogItem",
    "ItemKind",
    "LendingResult",
    "LendingStatus",
    "LibraryItem",
    "Magazine",
    "Member",
    "Newspaper",
    "NotFoundKind",
    "Thesis",
]
