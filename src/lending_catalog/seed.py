"""
Sample data for the lending catalog.

Twenty-five items (five of each kind) and five members. In the sample loans each
member borrows one item of every kind, so after ``run_sample_loans`` every item
is on loan and every member holds five items.

Items are kept as raw records and validated through the ``CatalogItem`` union,
the same path any externally supplied record would take.
"""

import logging
from typing import Any

from pydantic import TypeAdapter

from .catalog import Catalog
from .models.item import CatalogItem, LibraryItem
from .models.member import Member
from .models.result import LendingResult

logger = logging.getLogger(__name__)

SAMPLE_ITEMS: list[dict[str, Any]] = [
    {"kind": "book", "title": "The Hobbit", "item_id": "B001", "author": "J.R.R. Tolkien"},
    {"kind": "magazine", "title": "National Geographic", "item_id": "M001", "issue_date": "2023-01"},
    {"kind": "dvd", "title": "Inception", "item_id": "D001", "duration_minutes": 148},
    {"kind": "thesis", "title": "AI in Education", "item_id": "T001", "researcher": "Dr. Somchai"},
    {"kind": "newspaper", "title": "Bangkok Post", "item_id": "N001", "date": "2023-09-10"},
    {"kind": "book", "title": "1984", "item_id": "B002", "author": "George Orwell"},
    {"kind": "magazine", "title": "Time", "item_id": "M002", "issue_date": "2023-02"},
    {"kind": "dvd", "title": "The Matrix", "item_id": "D002", "duration_minutes": 136},
    {"kind": "book", "title": "To Kill a Mockingbird", "item_id": "B003", "author": "Harper Lee"},
    {"kind": "magazine", "title": "Scientific American", "item_id": "M003", "issue_date": "2022-12"},
    {"kind": "dvd", "title": "Interstellar", "item_id": "D003", "duration_minutes": 169},
    {"kind": "book", "title": "The Great Gatsby", "item_id": "B004", "author": "F. Scott Fitzgerald"},
    {"kind": "magazine", "title": "Forbes", "item_id": "M004", "issue_date": "2023-03"},
    {"kind": "dvd", "title": "Avatar", "item_id": "D004", "duration_minutes": 162},
    {"kind": "book", "title": "Moby Dick", "item_id": "B005", "author": "Herman Melville"},
    {"kind": "magazine", "title": "The New Yorker", "item_id": "M005", "issue_date": "2023-03"},
    {"kind": "dvd", "title": "The Godfather", "item_id": "D005", "duration_minutes": 175},
    {"kind": "newspaper", "title": "The Guardian", "item_id": "N002", "date": "2023-09-11"},
    {"kind": "thesis", "title": "Climate Change Impacts", "item_id": "T002", "researcher": "Dr. Smith"},
    {"kind": "newspaper", "title": "The New York Times", "item_id": "N003", "date": "2023-09-12"},
    {"kind": "thesis", "title": "Quantum Computing", "item_id": "T003", "researcher": "Dr. Johnson"},
    {"kind": "newspaper", "title": "Le Monde", "item_id": "N004", "date": "2023-09-13"},
    {"kind": "thesis", "title": "Renewable Energy", "item_id": "T004", "researcher": "Dr. Brown"},
    {"kind": "newspaper", "title": "El País", "item_id": "N005", "date": "2023-09-14"},
    {"kind": "thesis", "title": "Blockchain Technology", "item_id": "T005", "researcher": "Dr. Garcia"},
]

SAMPLE_MEMBERS: list[dict[str, Any]] = [
    {"member_name": "Alice", "member_id": "M1001"},
    {"member_name": "Bob", "member_id": "M1002"},
    {"member_name": "Charlie", "member_id": "M1003"},
    {"member_name": "Diana", "member_id": "M1004"},
    {"member_name": "Eve", "member_id": "M1005"},
]

# Member n borrows item n of each kind
SAMPLE_LOANS: list[tuple[str, str]] = [
    (f"M100{n}", f"{prefix}00{n}") for n in range(1, 6) for prefix in ("B", "M", "D", "N", "T")
]

_item_adapter = TypeAdapter(CatalogItem)


def load_sample_items() -> list[LibraryItem]:
    return [_item_adapter.validate_python(record) for record in SAMPLE_ITEMS]


def load_sample_members() -> list[Member]:
    return [Member.model_validate(record) for record in SAMPLE_MEMBERS]


def seed_sample_data(catalog: Catalog) -> None:
    """Register the sample items and members with ``catalog``."""
    for item in load_sample_items():
        catalog.add_item(item)
    for member in load_sample_members():
        catalog.add_member(member)
    logger.info(
        "Seeded %d items and %d members", len(catalog.items), len(catalog.members)
    )


def run_sample_loans(catalog: Catalog) -> list[LendingResult]:
    """Perform the sample borrows against ``catalog`` and return their results."""
    return [catalog.borrow_item(member_id, item_id) for member_id, item_id in SAMPLE_LOANS]
