"""Unit tests for the dependency container.

Tests cover:
- get_logger() renderer selection by environment
- Repository backend selection (memory, database, unsupported)
- get_event_bus() subscriptions and ordering
- Handler factories wiring shared singletons
- reset_container() dropping every cached singleton

Architecture:
- Settings patched at the module that reads them
- Caches cleared around every test
"""

from unittest.mock import MagicMock, patch

import pytest

from invoice_approval.application.commands.handlers import (
    ApproveInvoiceHandler,
    SubmitInvoiceHandler,
)
from invoice_approval.application.queries.handlers import GetApprovalByInvoiceHandler
from invoice_approval.core.container import (
    get_approval_repository,
    get_approve_invoice_handler,
    get_database,
    get_event_bus,
    get_get_approval_by_invoice_handler,
    get_invoice_repository,
    get_logger,
    get_submit_invoice_handler,
    reset_container,
)
from invoice_approval.core.enums import Environment
from invoice_approval.domain.events import (
    ApprovalProcessStarted,
    InvoiceApproved,
    InvoiceRejected,
    InvoiceSubmitted,
)
from invoice_approval.infrastructure.persistence.repositories import (
    ApprovalRepository,
    InMemoryApprovalRepository,
    InMemoryInvoiceRepository,
    InvoiceRepository,
)


@pytest.fixture(autouse=True)
def clean_container():
    reset_container()
    yield
    reset_container()


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        "environment,use_json",
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renderer_by_environment(self, environment, use_json):
        """Test JSON logs everywhere except development."""
        with patch(
            "invoice_approval.core.container.infrastructure.settings"
        ) as mock_settings:
            mock_settings.environment = environment
            mock_settings.log_level = "WARNING"

            with patch(
                "invoice_approval.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_adapter_cls:
                logger = get_logger()

        mock_adapter_cls.assert_called_once_with(use_json=use_json, level="WARNING")
        assert logger is mock_adapter_cls.return_value

    def test_get_logger_is_singleton(self):
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestRepositoryBackends:
    """Test repository factories."""

    def test_memory_backend(self):
        with patch(
            "invoice_approval.core.container.repositories.settings"
        ) as mock_settings:
            mock_settings.repository_backend = "memory"

            assert isinstance(get_invoice_repository(), InMemoryInvoiceRepository)
            assert isinstance(get_approval_repository(), InMemoryApprovalRepository)

    def test_database_backend(self):
        with patch(
            "invoice_approval.core.container.repositories.settings"
        ) as mock_settings, patch(
            "invoice_approval.core.container.repositories.get_database"
        ) as mock_get_database:
            mock_settings.repository_backend = "database"
            mock_get_database.return_value = MagicMock()

            assert isinstance(get_invoice_repository(), InvoiceRepository)
            assert isinstance(get_approval_repository(), ApprovalRepository)

    def test_unsupported_backend(self):
        with patch(
            "invoice_approval.core.container.repositories.settings"
        ) as mock_settings:
            mock_settings.repository_backend = "redis"

            with pytest.raises(ValueError, match="Unsupported REPOSITORY_BACKEND"):
                get_invoice_repository()
            with pytest.raises(ValueError, match="Unsupported REPOSITORY_BACKEND"):
                get_approval_repository()

    def test_repositories_are_singletons(self):
        assert get_invoice_repository() is get_invoice_repository()
        assert get_approval_repository() is get_approval_repository()

    def test_database_built_from_settings(self):
        with patch(
            "invoice_approval.core.container.infrastructure.settings"
        ) as mock_settings, patch(
            "invoice_approval.infrastructure.persistence.database.Database"
        ) as mock_database_cls:
            mock_settings.database_url = "sqlite+aiosqlite:///:memory:"
            mock_settings.db_echo = False

            database = get_database()

        mock_database_cls.assert_called_once_with(
            database_url="sqlite+aiosqlite:///:memory:", echo=False
        )
        assert database is mock_database_cls.return_value


@pytest.mark.unit
class TestGetEventBus:
    """Test get_event_bus() subscriptions."""

    def test_event_bus_is_singleton(self):
        assert get_event_bus() is get_event_bus()

    def test_subscriptions(self):
        """Test logging on every event plus the policy on InvoiceSubmitted."""
        event_bus = get_event_bus()

        assert event_bus.handler_count(InvoiceSubmitted) == 2
        assert event_bus.handler_count(ApprovalProcessStarted) == 1
        assert event_bus.handler_count(InvoiceApproved) == 1
        assert event_bus.handler_count(InvoiceRejected) == 1

    def test_logging_runs_before_policy(self):
        """Test the submission is logged before the approval process starts."""
        handlers = get_event_bus()._handlers[InvoiceSubmitted]

        assert [h.__qualname__ for h in handlers] == [
            "LoggingEventHandler.handle_invoice_submitted",
            "StartApprovalProcessPolicy.handle_invoice_submitted",
        ]


@pytest.mark.unit
class TestHandlerFactories:
    """Test handler factories share the app-scoped singletons."""

    def test_submit_handler_uses_shared_repo_and_bus(self):
        handler = get_submit_invoice_handler()

        assert isinstance(handler, SubmitInvoiceHandler)
        assert handler._invoice_repo is get_invoice_repository()
        assert handler._event_bus is get_event_bus()

    def test_handlers_are_request_scoped(self):
        assert get_approve_invoice_handler() is not get_approve_invoice_handler()
        assert isinstance(get_approve_invoice_handler(), ApproveInvoiceHandler)

    def test_query_handler_uses_shared_repo(self):
        handler = get_get_approval_by_invoice_handler()

        assert isinstance(handler, GetApprovalByInvoiceHandler)
        assert handler._approval_repo is get_approval_repository()


@pytest.mark.unit
class TestResetContainer:
    """Test reset_container()."""

    def test_reset_rebuilds_singletons(self):
        repo = get_invoice_repository()
        bus = get_event_bus()

        reset_container()

        assert get_invoice_repository() is not repo
        assert get_event_bus() is not bus
