"""Configuration management for the lending catalog.

Settings are read from ``LENDING_CATALOG_*`` environment variables, or from a
``.env`` file in the working directory, and validated with Pydantic v2.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Catalog configuration.

    Only ``reject_duplicate_ids`` changes lending behaviour; the remaining
    settings control naming and logging.
    """

    model_config = SettingsConfigDict(
        # Use LENDING_CATALOG_ prefix for all env vars
        env_prefix="LENDING_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # The .env file may carry settings for other tools
        extra="ignore",
    )

    catalog_name: str = Field(
        default="lending-catalog",
        description="Name reported by the command-line entry point",
        pattern=r"^[a-z0-9-]+$",
    )

    reject_duplicate_ids: bool = Field(
        default=False,
        description="Raise DuplicateError when an item or member id is registered twice",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("catalog_name")
    @classmethod
    def validate_catalog_name(cls, v: str) -> str:
        """Keep catalog names short enough to show in a report header."""
        if len(v) < 3:
            raise ValueError("Catalog name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Catalog name must not exceed 50 characters")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogSettings | None = None


def get_config() -> CatalogSettings:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogSettings()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
