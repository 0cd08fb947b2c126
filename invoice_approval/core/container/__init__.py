"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from invoice_approval.core.container import get_logger, get_event_bus, ...

The container is organized into modules:
- infrastructure: Core services (logging, database)
- repositories: Repository factories (memory or database backend)
- events: Event bus and subscriptions
- handlers: Command and query handler factories
"""

# Infrastructure services
from invoice_approval.core.container.infrastructure import get_database, get_logger

# Repositories
from invoice_approval.core.container.repositories import (
    get_approval_repository,
    get_invoice_repository,
)

# Event bus
from invoice_approval.core.container.events import get_event_bus

# Handlers
from invoice_approval.core.container.handlers import (
    get_approve_invoice_handler,
    get_get_approval_by_invoice_handler,
    get_get_approval_handler,
    get_get_invoice_handler,
    get_reject_invoice_handler,
    get_submit_invoice_handler,
)


def reset_container() -> None:
    """Drop every cached singleton.

    The next factory call rebuilds from current settings. Used by tests and
    on application shutdown.
    """
    get_event_bus.cache_clear()
    get_invoice_repository.cache_clear()
    get_approval_repository.cache_clear()
    get_database.cache_clear()
    get_logger.cache_clear()


__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    # Repositories
    "get_approval_repository",
    "get_invoice_repository",
    # Events
    "get_event_bus",
    # Handlers
    "get_approve_invoice_handler",
    "get_get_approval_by_invoice_handler",
    "get_get_approval_handler",
    "get_get_invoice_handler",
    "get_reject_invoice_handler",
    "get_submit_invoice_handler",
    # Lifecycle
    "reset_container",
]
