"""
Member model for the lending catalog.

A member is a borrower identified by ``member_id``. The member keeps the items it
currently holds, in borrow order. The items themselves are owned by the catalog;
the member only references them for as long as it holds them, so the held list
is private state changed only by ``borrow_item`` and ``return_item``.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .item import ItemKind, LibraryItem
from .result import LendingResult, LendingStatus, NotFoundKind

logger = logging.getLogger(__name__)

NO_BORROWED_ITEMS = "No borrowed items"
GROUP_SEPARATOR = " | "
DETAIL_SEPARATOR = "; "


class Member(BaseModel):
    """
    Represents a catalog member who can borrow items.

    A member always starts out holding nothing. Invariants kept by
    ``borrow_item`` and ``return_item``:
    - every item in ``borrowed_items`` is unavailable
    - no two borrowed items share an ``item_id``
    """

    member_name: str = Field(
        ...,
        description="Name used in borrow messages and reports",
        min_length=1,
        max_length=200,
        examples=["Alice", "Bob"],
    )

    member_id: str = Field(
        ...,
        description="Unique identifier for the member, matched exactly",
        min_length=1,
        frozen=True,
        examples=["M1001", "M1002"],
    )

    _borrowed_items: list[LibraryItem] = PrivateAttr(default_factory=list)

    @field_validator("member_name", mode="before")
    @classmethod
    def strip_member_name(cls, v: str) -> str:
        """Strip surrounding whitespace from names; identifiers are kept verbatim."""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def borrowed_items(self) -> list[LibraryItem]:
        """Items currently held, in borrow order (a copy)."""
        return list(self._borrowed_items)

    @property
    def borrowed_item_ids(self) -> list[str]:
        return [item.item_id for item in self._borrowed_items]

    def borrow_item(self, item: LibraryItem) -> LendingResult:
        """
        Borrow ``item`` for this member.

        The item is added to the member's list only when the item itself
        accepted the loan.
        """
        if item.item_id in self.borrowed_item_ids:
            logger.info("Member %s already holds item %s", self.member_id, item.item_id)
            return LendingResult.item_unavailable()

        result = item.borrow(self.member_name)
        if result.status == LendingStatus.SUCCESS:
            self._borrowed_items.append(item)
        return result

    def return_item(self, item_id: str) -> LendingResult:
        """
        Return a held item by identifier.

        Items the member does not hold are left untouched.
        """
        for index, item in enumerate(self._borrowed_items):
            if item.item_id == item_id:
                del self._borrowed_items[index]
                return item.return_item()
        return LendingResult.missing(NotFoundKind.BORROWED_ITEM)

    def list_borrowed_items(self) -> str:
        """
        Describe held items grouped by kind.

        Groups follow ``ItemKind`` order and are joined with " | "; within a
        group, details keep borrow order and are joined with "; ".
        """
        if not self._borrowed_items:
            return NO_BORROWED_ITEMS

        groups = []
        for kind in ItemKind:
            details = [item.get_details() for item in self._borrowed_items if item.kind == kind]
            if details:
                groups.append(f"{kind.group_label}: {DETAIL_SEPARATOR.join(details)}")
        return GROUP_SEPARATOR.join(groups)

    def count_borrowed_items(self) -> int:
        return len(self._borrowed_items)

    model_config = ConfigDict(
        validate_assignment=True,
        # Rejects any attempt to hand a member pre-held items
        extra="forbid",
        json_schema_extra={
            "example": {
                "member_name": "Alice",
                "member_id": "M1001",
            }
        },
    )
