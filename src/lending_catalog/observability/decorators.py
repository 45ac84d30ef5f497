"""Decorators for tracing catalog operations."""

import functools
import inspect
from collections.abc import Callable
from datetime import datetime
from typing import Any

import logfire

from ..models.result import LendingResult
from .config import active_config, is_initialized


def trace_operation(operation_name: str):
    """Decorator to trace a catalog operation in a Logfire span.

    The call runs untraced until observability is initialized.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            config = active_config()
            if not is_initialized() or config is None:
                return func(*args, **kwargs)

            with logfire.span(
                f"{config.span_prefix}.{operation_name}",
                operation_name=operation_name,
            ) as span:
                start_time = datetime.now()

                if config.record_arguments:
                    bound = signature.bind_partial(*args, **kwargs)
                    _add_attributes(span, "input", bound.arguments)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("operation.success", False)
                    span.set_attribute("operation.error", str(e))
                    raise

                span.set_attribute(
                    "operation.duration_ms", (datetime.now() - start_time).total_seconds() * 1000
                )
                _add_result_attributes(span, result)
                return result

        return wrapper

    return decorator


def _add_attributes(span, prefix: str, data: dict):
    """Add scalar arguments to the span, skipping ``self``."""
    for key, value in data.items():
        if key == "self":
            continue
        if isinstance(value, str | int | float | bool):
            span.set_attribute(f"{prefix}.{key}", value)


def _add_result_attributes(span, result: Any):
    if isinstance(result, LendingResult):
        span.set_attribute("operation.success", result.ok)
        span.set_attribute("operation.status", result.status.value)
    else:
        span.set_attribute("operation.success", True)
