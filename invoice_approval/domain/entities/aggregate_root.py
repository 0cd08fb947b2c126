"""Aggregate root base with an owned event buffer.

Aggregates record domain events as their state changes. The application
layer saves the aggregate first, then drains the buffer with
release_events() and publishes what it got.

Usage:
    invoice = result.value
    await invoice_repo.save(invoice)
    for event in invoice.release_events():
        await event_bus.publish(event)
"""

from invoice_approval.domain.events.base_event import DomainEvent


class AggregateRoot:
    """Base class for aggregates that emit domain events.

    Not a dataclass, so frozen (Invoice) and mutable (Approval) dataclass
    aggregates can both extend it. The buffer lives in the instance
    __dict__, outside the dataclass fields, so it never takes part in
    equality or repr and is only ever mutated in place.
    """

    @property
    def _events(self) -> list[DomainEvent]:
        return self.__dict__.setdefault("_event_buffer", [])

    def _record_event(self, event: DomainEvent) -> None:
        """Append an event to the buffer (recording order is preserved)."""
        self._events.append(event)

    def release_events(self) -> list[DomainEvent]:
        """Return all recorded events and clear the buffer.

        Returns:
            Events in recording order. A second call without new state
            changes returns an empty list.
        """
        released = list(self._events)
        self._events.clear()
        return released

    @property
    def recorded_events(self) -> tuple[DomainEvent, ...]:
        """Peek at the buffer without clearing it."""
        return tuple(self._events)
