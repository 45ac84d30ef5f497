"""Test configuration and fixtures for the lending catalog.

Provides:
1. Configuration isolation - each test starts from a fresh settings singleton
2. Local-only Logfire - spans are recorded without being exported, and the
   active observability state is restored after each test
3. Catalog fixtures - an empty catalog, a small hand-built one and the sample data
"""

import os
from collections.abc import Generator

import pytest

from lending_catalog.catalog import Catalog
from lending_catalog.config import CatalogSettings, reset_config
from lending_catalog.models import DVD, Book, Magazine, Member, Newspaper, Thesis
from lending_catalog.observability import ObservabilityConfig, initialize_observability
from lending_catalog.observability.config import _ObservabilityStore
from lending_catalog.seed import seed_sample_data

# === Session setup ===


@pytest.fixture(scope="session", autouse=True)
def local_observability() -> None:
    """Configure Logfire once, with no exporters."""
    initialize_observability(
        ObservabilityConfig(
            token="",
            environment="test",
            enabled=True,
            console_output=False,
            send_to_logfire=False,
        )
    )


@pytest.fixture(autouse=True)
def restore_observability() -> Generator[None, None, None]:
    """Undo any test's change to the active observability state."""
    config, initialized = _ObservabilityStore.config, _ObservabilityStore.initialized
    yield
    _ObservabilityStore.config, _ObservabilityStore.initialized = config, initialized


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear catalog env vars and the config singleton around every test."""
    for key in list(os.environ):
        if key.startswith("LENDING_CATALOG_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


# === Model fixtures ===


@pytest.fixture
def hobbit() -> Book:
    return Book(title="The Hobbit", item_id="B001", author="Tolkien")


@pytest.fixture
def inception() -> DVD:
    return DVD(title="Inception", item_id="D001", duration_minutes=148)


@pytest.fixture
def alice() -> Member:
    return Member(member_name="Alice", member_id="M1001")


@pytest.fixture
def one_of_each() -> list:
    """One item of every kind, deliberately not in kind order."""
    return [
        Thesis(title="AI in Education", item_id="T001", researcher="Dr. Somchai"),
        DVD(title="Inception", item_id="D001", duration_minutes=148),
        Newspaper(title="Bangkok Post", item_id="N001", date="2023-09-10"),
        Book(title="The Hobbit", item_id="B001", author="J.R.R. Tolkien"),
        Magazine(title="National Geographic", item_id="M001", issue_date="2023-01"),
    ]


# === Catalog fixtures ===


@pytest.fixture
def catalog() -> Catalog:
    """An empty catalog with default settings."""
    return Catalog(CatalogSettings())


@pytest.fixture
def small_catalog(catalog: Catalog, hobbit: Book, inception: DVD, alice: Member) -> Catalog:
    """Catalog with The Hobbit, Inception, Alice and Bob."""
    catalog.add_item(hobbit)
    catalog.add_item(inception)
    catalog.add_member(alice)
    catalog.add_member(Member(member_name="Bob", member_id="M1002"))
    return catalog


@pytest.fixture
def sample_catalog(catalog: Catalog) -> Catalog:
    """Catalog seeded with the sample items and members, nothing borrowed."""
    seed_sample_data(catalog)
    return catalog
