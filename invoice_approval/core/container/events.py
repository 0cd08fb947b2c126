# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. All subscriptions
are made here, once, when the bus is first requested.

Subscriptions (in order; the bus runs them sequentially):
    InvoiceSubmitted        → LoggingEventHandler, StartApprovalProcessPolicy
    ApprovalProcessStarted  → LoggingEventHandler
    InvoiceApproved         → LoggingEventHandler
    InvoiceRejected         → LoggingEventHandler

NOTE: mypy reports arg-type errors because handler signatures take concrete
event classes while EventHandler takes DomainEvent. Suppressed at file level.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_approval.domain.protocols.event_bus_protocol import (
        EventBusProtocol,
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        Event bus implementing EventBusProtocol, fully subscribed.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(InvoiceSubmitted(...))
    """
    from invoice_approval.application.commands.handlers.start_approval_process_handler import (
        StartApprovalProcessHandler,
    )
    from invoice_approval.application.event_handlers.start_approval_process_policy import (
        StartApprovalProcessPolicy,
    )
    from invoice_approval.core.container.infrastructure import get_logger
    from invoice_approval.core.container.repositories import get_approval_repository
    from invoice_approval.domain.events import (
        ApprovalProcessStarted,
        InvoiceApproved,
        InvoiceRejected,
        InvoiceSubmitted,
    )
    from invoice_approval.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from invoice_approval.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    # Observability
    logging_handler = LoggingEventHandler(logger=logger)
    event_bus.subscribe(InvoiceSubmitted, logging_handler.handle_invoice_submitted)
    event_bus.subscribe(
        ApprovalProcessStarted, logging_handler.handle_approval_process_started
    )
    event_bus.subscribe(InvoiceApproved, logging_handler.handle_invoice_approved)
    event_bus.subscribe(InvoiceRejected, logging_handler.handle_invoice_rejected)

    # Policies (dispatch commands back through the same bus)
    policy = StartApprovalProcessPolicy(
        start_approval_handler=StartApprovalProcessHandler(
            approval_repo=get_approval_repository(),
            event_bus=event_bus,
        ),
        logger=logger,
    )
    event_bus.subscribe(InvoiceSubmitted, policy.handle_invoice_submitted)

    return event_bus
