"""Configuration for Logfire observability of catalog circulation."""

import os

from pydantic import BaseModel, Field


class ObservabilityConfig(BaseModel):
    """Configuration for Logfire observability.

    Spans cover ``Catalog.borrow_item`` and ``Catalog.return_item``; the
    circulation counter is tagged with the event type and item kind.
    """

    # Connection
    token: str = Field(default_factory=lambda: os.getenv("LOGFIRE_TOKEN", ""))
    project_name: str = "lending-catalog"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Behavior
    enabled: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_ENABLED", "true").lower() == "true"
    )
    console_output: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_CONSOLE", "false").lower() == "true"
    )
    # Spans stay local unless explicitly sent
    send_to_logfire: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_SEND", "false").lower() == "true"
    )

    # Catalog spans
    span_prefix: str = Field(
        default="catalog",
        description="Prefix of span names, e.g. catalog.borrow_item",
        pattern=r"^[a-z][a-z0-9_.]*$",
    )
    record_arguments: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_RECORD_ARGUMENTS", "true").lower() == "true",
        description="Attach member and item ids to circulation spans",
    )
    record_circulation_metrics: bool = Field(
        default=True,
        description="Count successful borrows and returns",
    )


class _ObservabilityStore:
    """Internal storage for the active observability configuration.

    ``initialized`` is True only after ``initialize_observability`` configured
    Logfire; until then spans and metrics are skipped.
    """

    config: ObservabilityConfig | None = None
    initialized: bool = False


def is_initialized() -> bool:
    return _ObservabilityStore.initialized  # type: ignore[reportPrivateUsage]


def active_config() -> ObservabilityConfig | None:
    return _ObservabilityStore.config  # type: ignore[reportPrivateUsage]
