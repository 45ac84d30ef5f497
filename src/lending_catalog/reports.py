"""
Text reports over the catalog's items and members.

Two layouts are produced:

library summary::

    Items:
    Book: The Hobbit by J.R.R. Tolkien (ID: B001)
    DVD: Inception, Duration: 148 mins (ID: D001)

    Members:
    Alice (Borrowed: 1), Bob (Borrowed: 0)

members' borrowed items, one block per member, kinds on separate lines::

    Alice:
    Books: Book: The Hobbit by J.R.R. Tolkien (ID: B001)

    Bob:
    No borrowed items
"""

from collections.abc import Iterable

from .models.item import LibraryItem
from .models.member import GROUP_SEPARATOR, Member


def library_summary(items: Iterable[LibraryItem], members: Iterable[Member]) -> str:
    items_summary = "\n".join(item.get_details() for item in items)
    members_summary = ", ".join(
        f"{member.member_name} (Borrowed: {member.count_borrowed_items()})" for member in members
    )
    return f"Items:\n{items_summary}\n\nMembers:\n{members_summary}"


def members_borrowed_items(members: Iterable[Member]) -> str:
    blocks = []
    for member in members:
        listing = member.list_borrowed_items().replace(GROUP_SEPARATOR, "\n")
        blocks.append(f"{member.member_name}:\n{listing}")
    return "\n\n".join(blocks)
