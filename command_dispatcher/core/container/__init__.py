"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from command_dispatcher.core.container import get_logger, get_command_dispatcher

Organization:
- infrastructure: Logging
- events: Event publisher
- dispatching: Handler registry and command dispatcher
"""

from command_dispatcher.core.container.infrastructure import get_logger
from command_dispatcher.core.container.events import get_event_publisher
from command_dispatcher.core.container.dispatching import (
    get_command_dispatcher,
    get_handler_registry,
)

__all__ = [
    "get_command_dispatcher",
    "get_event_publisher",
    "get_handler_registry",
    "get_logger",
]
