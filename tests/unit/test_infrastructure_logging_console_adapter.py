"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer selection (console vs JSON)

Architecture:
- Unit tests with mocked structlog
"""

from unittest.mock import MagicMock, patch

import pytest

from crud_backbone.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "crud_backbone.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    with patch(STRUCTLOG) as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, level):
        adapter = ConsoleAdapter()

        getattr(adapter, level)("Route registered", method="GET", path="/clients")

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "Route registered",
            method="GET",
            path="/clients",
        )

    def test_error_adds_exception_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("Unhandled exception", error=RuntimeError("boom"), request_path="/clients")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "Unhandled exception",
            request_path="/clients",
            error_type="RuntimeError",
            error_message="boom",
        )

    def test_error_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("Insert failed", field="email")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "Insert failed",
            field="email",
        )

    def test_critical_adds_exception_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.critical("Database unreachable", error=ConnectionError("refused"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "Database unreachable",
            error_type="ConnectionError",
            error_message="refused",
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test bound adapters."""

    def test_bind_returns_new_adapter_with_bound_logger(self, mock_structlog):
        adapter = ConsoleAdapter()
        base_logger = mock_structlog.get_logger.return_value
        bound_logger = MagicMock()
        base_logger.bind.return_value = bound_logger

        bound = adapter.bind(trace_id="abc")
        bound.info("Request validated")

        assert bound is not adapter
        base_logger.bind.assert_called_once_with(trace_id="abc")
        bound_logger.info.assert_called_once_with("Request validated")
        base_logger.info.assert_not_called()

    def test_with_context_is_bind(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.with_context(field="email")

        mock_structlog.get_logger.return_value.bind.assert_called_once_with(field="email")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self, mock_structlog):
        ConsoleAdapter()

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_unknown_level_falls_back_to_info(self, mock_structlog):
        import logging

        ConsoleAdapter(level="chatty")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.INFO)

    def test_level_is_case_insensitive(self, mock_structlog):
        import logging

        ConsoleAdapter(level="debug")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.DEBUG)
