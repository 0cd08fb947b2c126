"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details added to error/critical
- Context binding
- Renderer selection (JSON vs console)

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

from unittest.mock import MagicMock, patch

import pytest

from invoice_approval.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "invoice_approval.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_pass_context_through(self, level):
        """Test debug/info/warning forward message and context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("Some message", invoice_id="inv-1", count=2)

            getattr(mock_logger, level).assert_called_once_with(
                "Some message", invoice_id="inv-1", count=2
            )

    def test_error_without_exception(self):
        """Test error() logs plain context when no exception is given."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Error occurred", retry_count=3)

            mock_logger.error.assert_called_once_with("Error occurred", retry_count=3)

    def test_error_with_exception_adds_type_and_message(self):
        """Test error() expands the exception into structured fields."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Handler failed", error=ValueError("bad value"), step=2)

            mock_logger.error.assert_called_once_with(
                "Handler failed",
                step=2,
                error_type="ValueError",
                error_message="bad value",
            )

    def test_critical_with_exception_adds_type_and_message(self):
        """Test critical() expands the exception like error()."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("Database down", error=ConnectionError("refused"))

            mock_logger.critical.assert_called_once_with(
                "Database down",
                error_type="ConnectionError",
                error_message="refused",
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter_with_bound_logger(self):
        """Test bind() wraps the structlog bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="t-1")
            bound.info("Bound message")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="t-1")
            bound_logger.info.assert_called_once_with("Bound message")
            mock_logger.info.assert_not_called()

    def test_with_context_is_alias_for_bind(self):
        """Test with_context() binds the same way."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(request_id="r-1")

            mock_logger.bind.assert_called_once_with(request_id="r-1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_use_json(self):
        """Test use_json=True appends the JSON renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once_with()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()
            mock_structlog.configure.assert_called_once()

    def test_console_renderer_by_default(self):
        """Test the human-readable renderer is the default."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filter_uses_level_name(self):
        """Test the filtering logger is built from the level name."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)

    def test_unknown_level_falls_back_to_info(self):
        """Test an unknown level name means INFO."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="chatty")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(20)
