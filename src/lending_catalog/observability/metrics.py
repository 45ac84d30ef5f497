"""Custom metrics for the lending catalog."""

import logfire

from .config import active_config, is_initialized

items_circulation = logfire.metric_counter(
    "catalog.items.circulation", description="Item circulation events (borrow/return)"
)


def record_circulation_event(event_type: str, item_kind: str) -> None:
    """Record a circulation event, once observability is initialized."""
    config = active_config()
    if not is_initialized() or config is None or not config.record_circulation_metrics:
        return
    items_circulation.add(1, {"event_type": event_type, "item_kind": item_kind})
