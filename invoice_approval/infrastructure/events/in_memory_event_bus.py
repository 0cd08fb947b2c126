"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Delivery is
synchronous from the caller's point of view: publish() awaits each handler
in subscription order and only returns when all of them finished.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Sequential, ordered delivery
    - Fail-fast: a handler exception is logged and re-raised to the publisher

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(InvoiceSubmitted, policy.handle_invoice_submitted)
    >>> await bus.publish(event)
"""

from collections import defaultdict

from invoice_approval.domain.events.base_event import DomainEvent
from invoice_approval.domain.protocols.event_bus_protocol import EventHandler
from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with ordered, fail-fast delivery.

    Thread Safety:
        NOT thread-safe (single-process, single event loop design).

    Attributes:
        _handlers: Event class → handlers in subscription order.
        _logger: Logger for publishing and handler failures.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(InvoiceApproved, logging_handler.handle_invoice_approved)
        >>> bus.subscribe(InvoiceApproved, notify_submitter)
        >>> await bus.publish(InvoiceApproved(...))
        >>> # logging handler ran first, then notify_submitter
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for event publishing (debug) and handler
                failures (error).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async callable invoked with the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
            - Handlers run in the order they were subscribed
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers, one at a time.

        Flow:
            1. Look up handlers for type(event)
            2. If none, return (no-op)
            3. Await each handler in subscription order
            4. On the first exception: log it, stop, re-raise

        Args:
            event: Domain event to publish.

        Raises:
            Exception: The first handler exception, unchanged.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                self._logger.error(
                    "event_handler_failed",
                    error=e,
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__qualname__", repr(handler)),
                )
                raise
