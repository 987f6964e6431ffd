"""Event publisher dependency factory."""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from command_dispatcher.infrastructure.events.in_memory_event_publisher import (
        InMemoryEventPublisher,
    )


@lru_cache()
def get_event_publisher() -> "InMemoryEventPublisher":
    """Get event publisher singleton (app-scoped).

    Returns the concrete in-memory adapter (not just the protocol) so that
    application wiring can call ``subscribe`` at startup. Failure mode comes
    from ``EVENTS_FAIL_OPEN``.

    Usage:
        publisher = get_event_publisher()
        publisher.subscribe(OrderPlaced, send_confirmation_email)
    """
    from command_dispatcher.core.config import get_settings
    from command_dispatcher.core.container.infrastructure import get_logger
    from command_dispatcher.infrastructure.events.in_memory_event_publisher import (
        InMemoryEventPublisher,
    )

    return InMemoryEventPublisher(
        logger=get_logger(),
        fail_open=get_settings().events_fail_open,
    )
