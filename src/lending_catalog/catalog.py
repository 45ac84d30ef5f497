"""
The lending catalog.

``Catalog`` is the aggregate root: it owns the canonical lists of items and
members and routes borrow and return requests to them by identifier.

Lookups are linear scans by exact identifier and the first match wins, so when
duplicate identifiers are allowed (the default) later registrations are
shadowed. Setting ``reject_duplicate_ids`` makes registration raise
``DuplicateError`` instead.

Borrow and return never raise for unknown identifiers: the ``NotFoundError``
from the lookup is caught here and reported as a NOT_FOUND ``LendingResult``.
"""

import logging

from . import reports
from .config import CatalogSettings, get_config
from .exceptions import DuplicateError, NotFoundError
from .models.item import LibraryItem
from .models.member import Member
from .models.result import LendingResult, NotFoundKind
from .observability import record_circulation_event, trace_operation

logger = logging.getLogger(__name__)


class Catalog:
    """Items, members and the borrow/return operations that link them."""

    def __init__(self, settings: CatalogSettings | None = None):
        self.settings = settings or get_config()
        self.items: list[LibraryItem] = []
        self.members: list[Member] = []

    # ---- registration

    def add_item(self, item: LibraryItem) -> None:
        if self.settings.reject_duplicate_ids and self.find_item(item.item_id) is not None:
            raise DuplicateError(f"Item with id '{item.item_id}' already exists")
        self.items.append(item)
        logger.debug("Added %s item %s", item.kind.value, item.item_id)

    def add_member(self, member: Member) -> None:
        if self.settings.reject_duplicate_ids and self.find_member(member.member_id) is not None:
            raise DuplicateError(f"Member with id '{member.member_id}' already exists")
        self.members.append(member)
        logger.debug("Added member %s", member.member_id)

    # ---- lookups

    def find_item(self, item_id: str) -> LibraryItem | None:
        return next((item for item in self.items if item.item_id == item_id), None)

    def find_member(self, member_id: str) -> Member | None:
        return next((member for member in self.members if member.member_id == member_id), None)

    def get_item(self, item_id: str) -> LibraryItem:
        """
        Get an item by identifier.

        Raises:
            NotFoundError: If no item has this identifier
        """
        item = self.find_item(item_id)
        if item is None:
            raise NotFoundError(f"Item with id '{item_id}' not found")
        return item

    def get_member(self, member_id: str) -> Member:
        """
        Get a member by identifier.

        Raises:
            NotFoundError: If no member has this identifier
        """
        member = self.find_member(member_id)
        if member is None:
            raise NotFoundError(f"Member with id '{member_id}' not found")
        return member

    # ---- circulation

    @trace_operation("borrow_item")
    def borrow_item(self, member_id: str, item_id: str) -> LendingResult:
        """Lend item ``item_id`` to member ``member_id``."""
        try:
            member = self.get_member(member_id)
            item = self.get_item(item_id)
        except NotFoundError as e:
            logger.info("Borrow failed - %s", e)
            return LendingResult.missing(NotFoundKind.MEMBER_OR_ITEM)

        result = member.borrow_item(item)
        if result.ok:
            record_circulation_event("borrow", item.kind.value)
        else:
            logger.info("Borrow of %s by %s refused: %s", item_id, member_id, result.message)
        return result

    @trace_operation("return_item")
    def return_item(self, member_id: str, item_id: str) -> LendingResult:
        """Take item ``item_id`` back from member ``member_id``."""
        try:
            member = self.get_member(member_id)
        except NotFoundError as e:
            logger.info("Return failed - %s", e)
            return LendingResult.missing(NotFoundKind.MEMBER)

        result = member.return_item(item_id)
        if result.ok:
            item = self.find_item(item_id)
            record_circulation_event("return", item.kind.value if item else "unknown")
        else:
            logger.info("Return of %s by %s refused: %s", item_id, member_id, result.message)
        return result

    # ---- reporting

    def get_library_summary(self) -> str:
        return reports.library_summary(self.items, self.members)

    def get_members_borrowed_items(self) -> str:
        return reports.members_borrowed_items(self.members)
