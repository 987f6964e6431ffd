"""Event publisher protocol (port) for domain events.

The dispatcher forwards every event carried by a command response to an
object satisfying this protocol, one ``publish`` call per event, in order.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Infrastructure provides adapters (InMemoryEventPublisher)
    - Any third-party dispatcher exposing ``publish(event)`` fits

Error contract:
    ``publish`` may raise any exception. The dispatcher does not catch it:
    the exception reaches the caller of ``dispatch`` and the remaining events
    of that response are not published.
"""

from typing import Any, Protocol


class EventPublisherProtocol(Protocol):
    """Protocol for event publisher implementations."""

    def publish(self, event: Any) -> None:
        """Publish a single event.

        Args:
            event: Event to publish. No structure is assumed.
        """
        ...
