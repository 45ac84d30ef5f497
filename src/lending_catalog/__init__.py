"""
Lending Catalog Package.

An in-memory lending catalog: items (books, magazines, DVDs, newspapers and
theses), members, and a catalog that links them through borrow and return.

Key Components:
- models: Pydantic models for items, members and lending results
- catalog: the Catalog aggregate and its borrow/return operations
- reports: text layouts for the library summary and borrowed items
- config: Configuration management with Pydantic v2
- observability: Logfire spans and metrics for circulation
- seed: sample data for demos and tests
"""

__version__ = "0.1.0"

from .catalog import Catalog
from .config import CatalogSettings, get_config, reset_config
from .exceptions import CatalogException, DuplicateError, NotFoundError
from .models import (
    DVD,
    Book,
    CatalogItem,
    ItemKind,
    LendingResult,
    LendingStatus,
    LibraryItem,
    Magazine,
    Member,
    Newspaper,
    NotFoundKind,
    Thesis,
)

__all__ = [
    "DVD",
    "Book",
    "Catalog",
    "CatalogException",
    "CatalogItem",
    "CatalogSettings",
    "DuplicateError",
    "ItemKind",
    "LendingResult",
    "LendingStatus",
    "LibraryItem",
    "Magazine",
    "Member",
    "Newspaper",
    "NotFoundError",
    "NotFoundKind",
    "Thesis",
    "__version__",
    "get_config",
    "reset_config",
]
