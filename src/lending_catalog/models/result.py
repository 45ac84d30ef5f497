"""
Lending results for the catalog.

Every borrow and return operation reports its outcome as a ``LendingResult``
rather than raising. The status tells callers what happened; the message is the
human-readable text that existing callers print or compare against:

- SUCCESS: "<title> borrowed by <name>" / "<title> returned"
- ITEM_UNAVAILABLE: "Item not available"
- NOT_FOUND: "Member or Item not found", "Member not found" or
  "Item not found in borrowed list", depending on what was missing
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ITEM_NOT_AVAILABLE = "Item not available"
MEMBER_OR_ITEM_NOT_FOUND = "Member or Item not found"
MEMBER_NOT_FOUND = "Member not found"
ITEM_NOT_BORROWED = "Item not found in borrowed list"


class LendingStatus(str, Enum):
    """Outcome of a borrow or return operation."""

    SUCCESS = "success"
    ITEM_UNAVAILABLE = "item_unavailable"
    NOT_FOUND = "not_found"


class NotFoundKind(str, Enum):
    """Which lookup failed for a NOT_FOUND result."""

    MEMBER_OR_ITEM = "member_or_item"
    MEMBER = "member"
    BORROWED_ITEM = "borrowed_item"


_NOT_FOUND_MESSAGES = {
    NotFoundKind.MEMBER_OR_ITEM: MEMBER_OR_ITEM_NOT_FOUND,
    NotFoundKind.MEMBER: MEMBER_NOT_FOUND,
    NotFoundKind.BORROWED_ITEM: ITEM_NOT_BORROWED,
}


class LendingResult(BaseModel):
    """Result of a single lending operation."""

    status: LendingStatus = Field(
        ...,
        description="What happened",
    )

    message: str = Field(
        ...,
        description="Human-readable status text",
        examples=["The Hobbit borrowed by Alice", ITEM_NOT_AVAILABLE],
    )

    not_found: NotFoundKind | None = Field(
        None,
        description="Which lookup failed, set only for NOT_FOUND results",
    )

    @classmethod
    def success(cls, message: str) -> "LendingResult":
        return cls(status=LendingStatus.SUCCESS, message=message)

    @classmethod
    def item_unavailable(cls) -> "LendingResult":
        return cls(status=LendingStatus.ITEM_UNAVAILABLE, message=ITEM_NOT_AVAILABLE)

    @classmethod
    def missing(cls, kind: NotFoundKind) -> "LendingResult":
        """Build a NOT_FOUND result carrying the reserved message for ``kind``."""
        return cls(
            status=LendingStatus.NOT_FOUND,
            message=_NOT_FOUND_MESSAGES[kind],
            not_found=kind,
        )

    @property
    def ok(self) -> bool:
        """True only when the operation changed state as requested."""
        return self.status == LendingStatus.SUCCESS

    def __str__(self) -> str:
        return self.message

    model_config = ConfigDict(frozen=True)
