"""Infrastructure event publishing.

Event Publisher:
    - InMemoryEventPublisher: synchronous, ordered, exact-class routing
"""

from command_dispatcher.infrastructure.events.in_memory_event_publisher import (
    EventSubscriber,
    InMemoryEventPublisher,
)

__all__ = ["EventSubscriber", "InMemoryEventPublisher"]
