"""Event bus protocol (port) for domain events.

The domain defines the interface; infrastructure provides the adapter
(InMemoryEventBus). The container builds one bus per application and
registers every subscriber at startup.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Handlers are async callables taking a single event

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(InvoiceSubmitted, policy.handle_invoice_submitted)
    >>> await event_bus.publish(event)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from invoice_approval.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: accepts one event, returns None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Delivery contract:
        1. **In order**: Handlers for an event type run one after another,
           in subscription order.
        2. **Awaited**: publish() returns only after every handler finished.
        3. **Fail-fast**: A handler exception stops delivery of that event
           and propagates to the publisher.
        4. **Exact type routing**: A handler only receives events of the
           type it subscribed to (no inheritance matching).
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an async handler for an event type.

        Args:
            event_type: Event class to handle.
            handler: Async callable invoked with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every handler subscribed to its type.

        No subscribers is not an error.

        Args:
            event: Domain event to deliver.

        Raises:
            Exception: Whatever the first failing handler raised.
        """
        ...
