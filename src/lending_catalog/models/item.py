"""
Item models for the lending catalog.

An item is anything the catalog lends out. Every item shares a title, a unique
identifier and an availability flag; each kind adds one descriptive field:

- Book: author
- Magazine: issue date
- DVD: running time in minutes
- Newspaper: publication date
- Thesis: researcher

The five kinds form a closed set. ``CatalogItem`` is the discriminated union over
them keyed on ``kind``, so a raw record such as
``{"kind": "dvd", "title": "Inception", "item_id": "D001", "duration_minutes": 148}``
validates straight into a ``DVD``.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .result import LendingResult

logger = logging.getLogger(__name__)


class ItemKind(str, Enum):
    """Kinds of catalog items, in the order borrowed items are grouped."""

    BOOK = "book"
    MAGAZINE = "magazine"
    DVD = "dvd"
    NEWSPAPER = "newspaper"
    THESIS = "thesis"

    @property
    def group_label(self) -> str:
        """Plural label used when listing borrowed items by kind."""
        return _GROUP_LABELS[self]


_GROUP_LABELS = {
    ItemKind.BOOK: "Books",
    ItemKind.MAGAZINE: "Magazines",
    ItemKind.DVD: "DVDs",
    ItemKind.NEWSPAPER: "Newspapers",
    ItemKind.THESIS: "Theses",
}


class LibraryItem(BaseModel, ABC):
    """
    Base model for everything the catalog lends.

    Availability is the only mutable state: it flips to False on a successful
    borrow and back to True on return. None of the lending methods raise; the
    outcome is carried by the returned ``LendingResult``.
    """

    kind: ItemKind = Field(
        ...,
        description="Discriminant selecting the item variant",
    )

    title: str = Field(
        ...,
        description="Title shown in status messages and listings",
        min_length=1,
        max_length=500,
        examples=["The Hobbit", "National Geographic"],
    )

    item_id: str = Field(
        ...,
        description="Catalog identifier, unique per item, matched exactly",
        min_length=1,
        frozen=True,
        examples=["B001", "D003"],
    )

    available: bool = Field(
        default=True,
        description="True while no member holds the item",
    )

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip surrounding whitespace from titles; identifiers are kept verbatim."""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def is_available(self) -> bool:
        """Check if the item can be borrowed."""
        return self.available

    def borrow(self, borrower_name: str) -> LendingResult:
        """
        Lend the item to ``borrower_name``.

        Returns the ITEM_UNAVAILABLE result, without touching the item, if it
        is already on loan.
        """
        if not self.available:
            return LendingResult.item_unavailable()
        self.available = False
        return LendingResult.success(f"{self.title} borrowed by {borrower_name}")

    def return_item(self) -> LendingResult:
        """
        Mark the item as available again.

        This does not check that the item was on loan; callers that track
        holders (``Member.return_item``) guard against spurious returns.
        """
        if self.available:
            logger.warning("Item %s returned while not on loan", self.item_id)
        self.available = True
        return LendingResult.success(f"{self.title} returned")

    @abstractmethod
    def get_details(self) -> str:
        """One-line description of the item for listings."""

    model_config = ConfigDict(
        # Catch bad availability or title updates at assignment time
        validate_assignment=True,
        extra="forbid",
    )


class Book(LibraryItem):
    kind: Literal[ItemKind.BOOK] = ItemKind.BOOK

    author: str = Field(
        ...,
        description="Author of the book",
        min_length=1,
        examples=["J.R.R. Tolkien"],
    )

    def get_details(self) -> str:
        return f"Book: {self.title} by {self.author} (ID: {self.item_id})"


class Magazine(LibraryItem):
    kind: Literal[ItemKind.MAGAZINE] = ItemKind.MAGAZINE

    issue_date: str = Field(
        ...,
        description="Issue the copy belongs to",
        min_length=1,
        examples=["2023-01"],
    )

    def get_details(self) -> str:
        return f"Magazine: {self.title}, Issue: {self.issue_date} (ID: {self.item_id})"


class DVD(LibraryItem):
    kind: Literal[ItemKind.DVD] = ItemKind.DVD

    duration_minutes: int = Field(
        ...,
        description="Running time in minutes",
        ge=0,
        examples=[148, 136],
    )

    def get_details(self) -> str:
        return f"DVD: {self.title}, Duration: {self.duration_minutes} mins (ID: {self.item_id})"


class Newspaper(LibraryItem):
    kind: Literal[ItemKind.NEWSPAPER] = ItemKind.NEWSPAPER

    date: str = Field(
        ...,
        description="Publication date of the edition",
        min_length=1,
        examples=["2023-09-10"],
    )

    def get_details(self) -> str:
        return f"Newspaper: {self.title}, Date: {self.date} (ID: {self.item_id})"


class Thesis(LibraryItem):
    kind: Literal[ItemKind.THESIS] = ItemKind.THESIS

    researcher: str = Field(
        ...,
        description="Researcher who wrote the thesis",
        min_length=1,
        examples=["Dr. Somchai"],
    )

    def get_details(self) -> str:
        return f"Thesis: {self.title} by {self.researcher} (ID: {self.item_id})"


CatalogItem = Annotated[
    Book | Magazine | DVD | Newspaper | Thesis,
    Field(discriminator="kind"),
]
