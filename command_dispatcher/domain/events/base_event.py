"""Base domain event class.

Domain events represent "things that happened" and are always named in past
tense (e.g., OrderPlaced, StockReserved). Handlers attach them to their
command response; the dispatcher forwards them to the configured publisher.

The dispatcher assumes nothing about event structure: any object may be
returned from ``get_events()``. DomainEvent is the convenience base used by
the in-memory adapters and the test suite.

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class OrderPlaced(DomainEvent):
    ...     order_id: UUID
    >>>
    >>> event = OrderPlaced(order_id=uuid4())
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for domain events.

    All domain events SHOULD:
        1. Inherit from this base class
        2. Use past tense naming (OrderPlaced, NOT PlaceOrder)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
