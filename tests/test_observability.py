"""Tests for Logfire observability wiring."""

from unittest.mock import MagicMock, patch

import pytest

from lending_catalog.catalog import Catalog
from lending_catalog.observability import (
    ObservabilityConfig,
    get_config,
    initialize_observability,
    is_initialized,
    trace_operation,
)
from lending_catalog.observability.config import _ObservabilityStore


class TestObservabilityConfig:
    """Test observability configuration."""

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for key in (
            "LOGFIRE_TOKEN",
            "LOGFIRE_ENABLED",
            "LOGFIRE_CONSOLE",
            "LOGFIRE_SEND",
            "LOGFIRE_RECORD_ARGUMENTS",
        ):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        config = ObservabilityConfig()

        assert config.token == ""
        assert config.environment == "development"
        assert config.enabled is True
        assert config.console_output is False
        assert config.send_to_logfire is False
        assert config.record_arguments is True
        assert config.span_prefix == "catalog"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOGFIRE_ENABLED", "false")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        config = ObservabilityConfig()

        assert config.enabled is False
        assert config.environment == "staging"

    def test_disabled_config_skips_logfire(self):
        disabled = ObservabilityConfig(enabled=False)

        with patch("lending_catalog.observability.logfire.configure") as configure:
            assert initialize_observability(disabled) is False

        configure.assert_not_called()
        assert get_config() is disabled

    def test_enabled_config_configures_logfire(self):
        config = ObservabilityConfig(
            token="", environment="test", enabled=True, console_output=False, send_to_logfire=False
        )

        with patch("lending_catalog.observability.logfire.configure") as configure:
            assert initialize_observability(config) is True

        configure.assert_called_once()
        kwargs = configure.call_args.kwargs
        assert kwargs["token"] is None
        assert kwargs["environment"] == "test"
        assert kwargs["send_to_logfire"] is False
        assert kwargs["console"] is False


class TestTraceOperation:
    """Test the tracing decorator."""

    def test_span_records_arguments_and_status(self, small_catalog: Catalog):
        span = MagicMock()
        span_cm = MagicMock()
        span_cm.__enter__.return_value = span

        with patch(
            "lending_catalog.observability.decorators.logfire.span", return_value=span_cm
        ) as span_factory:
            result = small_catalog.borrow_item("M1001", "B001")

        assert result.ok is True
        span_factory.assert_called_once()
        assert span_factory.call_args.args[0] == "catalog.borrow_item"
        span.set_attribute.assert_any_call("input.member_id", "M1001")
        span.set_attribute.assert_any_call("input.item_id", "B001")
        span.set_attribute.assert_any_call("operation.status", "success")

    def test_span_records_errors(self):
        span = MagicMock()
        span_cm = MagicMock()
        span_cm.__enter__.return_value = span

        @trace_operation("explode")
        def explode(reason: str):
            raise RuntimeError(reason)

        with patch(
            "lending_catalog.observability.decorators.logfire.span", return_value=span_cm
        ):
            with pytest.raises(RuntimeError):
                explode("boom")

        span.set_attribute.assert_any_call("operation.success", False)
        span.set_attribute.assert_any_call("operation.error", "boom")

    def test_wrapped_function_keeps_name(self):
        assert Catalog.borrow_item.__name__ == "borrow_item"
        assert Catalog.return_item.__name__ == "return_item"

    def test_arguments_omitted_when_not_recorded(self, small_catalog: Catalog):
        span = MagicMock()
        span_cm = MagicMock()
        span_cm.__enter__.return_value = span
        _ObservabilityStore.config = ObservabilityConfig(
            enabled=True, record_arguments=False, span_prefix="library"
        )

        with patch(
            "lending_catalog.observability.decorators.logfire.span", return_value=span_cm
        ) as span_factory:
            small_catalog.return_item("M1001", "B001")

        assert span_factory.call_args.args[0] == "library.return_item"
        recorded = [call.args[0] for call in span.set_attribute.call_args_list]
        assert not any(name.startswith("input.") for name in recorded)
        span.set_attribute.assert_any_call("operation.status", "not_found")


class TestUninitialized:
    """Test that nothing is traced before initialize_observability."""

    @pytest.fixture(autouse=True)
    def uninitialized(self):
        _ObservabilityStore.config = None
        _ObservabilityStore.initialized = False

    def test_not_initialized(self):
        assert is_initialized() is False

    def test_catalog_runs_without_spans(self, small_catalog: Catalog):
        with patch("lending_catalog.observability.decorators.logfire.span") as span_factory:
            borrowed = small_catalog.borrow_item("M1001", "B001")
            returned = small_catalog.return_item("M1001", "B001")

        span_factory.assert_not_called()
        assert borrowed.message == "The Hobbit borrowed by Alice"
        assert returned.message == "The Hobbit returned"

    def test_errors_propagate_without_spans(self):
        @trace_operation("explode")
        def explode(reason: str):
            raise RuntimeError(reason)

        with patch("lending_catalog.observability.decorators.logfire.span") as span_factory:
            with pytest.raises(RuntimeError, match="boom"):
                explode("boom")

        span_factory.assert_not_called()

    def test_circulation_not_counted(self, small_catalog: Catalog):
        with patch("lending_catalog.observability.metrics.items_circulation") as counter:
            small_catalog.borrow_item("M1001", "B001")

        counter.add.assert_not_called()

    def test_disabled_initialization_stays_untraced(self, small_catalog: Catalog):
        initialize_observability(ObservabilityConfig(enabled=False))

        with patch("lending_catalog.observability.decorators.logfire.span") as span_factory:
            small_catalog.borrow_item("M1001", "B001")

        assert is_initialized() is False
        span_factory.assert_not_called()


class TestCirculationMetrics:
    """Test the circulation counter once observability is initialized."""

    def test_successful_borrow_counted(self, small_catalog: Catalog):
        with patch("lending_catalog.observability.metrics.items_circulation") as counter:
            small_catalog.borrow_item("M1001", "B001")
            small_catalog.borrow_item("M1002", "B001")  # refused

        counter.add.assert_called_once_with(1, {"event_type": "borrow", "item_kind": "book"})

    def test_counter_can_be_switched_off(self, small_catalog: Catalog):
        _ObservabilityStore.config = ObservabilityConfig(
            enabled=True, record_circulation_metrics=False
        )

        with patch("lending_catalog.observability.metrics.items_circulation") as counter:
            small_catalog.borrow_item("M1001", "B001")

        counter.add.assert_not_called()
