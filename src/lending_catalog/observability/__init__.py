"""Logfire observability for the lending catalog.

Nothing is traced until ``initialize_observability`` has configured Logfire, so
using ``Catalog`` as a library never touches an unconfigured Logfire.
"""

import logging

import logfire

from .config import ObservabilityConfig, _ObservabilityStore, is_initialized
from .decorators import trace_operation
from .metrics import record_circulation_event

logger = logging.getLogger(__name__)


def initialize_observability(config: ObservabilityConfig | None = None) -> bool:
    """Initialize Logfire with configuration.

    Returns True when Logfire was configured, False when disabled.
    """
    config = config or ObservabilityConfig()
    _ObservabilityStore.config = config  # type: ignore[reportPrivateUsage]

    if not config.enabled:
        _ObservabilityStore.initialized = False  # type: ignore[reportPrivateUsage]
        logger.debug("Observability disabled via configuration")
        return False

    logfire.configure(
        token=config.token or None,
        service_name=config.project_name,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        # ConsoleOptions default when enabled, no console exporter otherwise
        console=None if config.console_output else False,
    )
    _ObservabilityStore.initialized = True  # type: ignore[reportPrivateUsage]
    logger.debug("Logfire configured for environment %s", config.environment)
    return True


def get_config() -> ObservabilityConfig:
    """Get current observability configuration."""
    if _ObservabilityStore.config is None:  # type: ignore[reportPrivateUsage]
        _ObservabilityStore.config = ObservabilityConfig()  # type: ignore[reportPrivateUsage]
    return _ObservabilityStore.config  # type: ignore[reportPrivateUsage]


__all__ = [
    "ObservabilityConfig",
    "get_config",
    "initialize_observability",
    "is_initialized",
    "record_circulation_event",
    "trace_operation",
]
