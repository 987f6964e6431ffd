"""Dispatcher dependency factories.

The registry and dispatcher are app-scoped singletons. Handlers are
registered on ``get_handler_registry()`` at startup; every caller then
shares ``get_command_dispatcher()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from command_dispatcher.application.dispatching.command_dispatcher import (
        CommandDispatcher,
    )
    from command_dispatcher.application.dispatching.handler_registry import (
        CommandHandlerRegistry,
    )


@lru_cache()
def get_handler_registry() -> "CommandHandlerRegistry":
    """Get the handler registry singleton (app-scoped)."""
    from command_dispatcher.application.dispatching.handler_registry import (
        CommandHandlerRegistry,
    )
    from command_dispatcher.core.container.infrastructure import get_logger

    return CommandHandlerRegistry(logger=get_logger())


@lru_cache()
def get_command_dispatcher() -> "CommandDispatcher":
    """Get the command dispatcher singleton (app-scoped).

    Wired with the registry singleton as resolver and the in-memory event
    publisher singleton.

    Usage:
        get_handler_registry().register(PlaceOrder, place_order)
        response = get_command_dispatcher().dispatch(PlaceOrder(...))
    """
    from command_dispatcher.application.dispatching.command_dispatcher import (
        CommandDispatcher,
    )
    from command_dispatcher.core.container.events import get_event_publisher
    from command_dispatcher.core.container.infrastructure import get_logger

    return CommandDispatcher(
        get_handler_registry(),
        get_event_publisher(),
        logger=get_logger(),
    )
