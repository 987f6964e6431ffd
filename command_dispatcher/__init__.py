"""Command dispatcher: resolve a handler, run it, forward its events.

Usage:
    >>> from command_dispatcher import (
    ...     CommandDispatcher,
    ...     CommandHandlerRegistry,
    ...     CommandResponse,
    ...     InMemoryEventPublisher,
    ... )
    >>>
    >>> registry = CommandHandlerRegistry()
    >>> registry.register(PlaceOrder, place_order)
    >>> dispatcher = CommandDispatcher(registry, InMemoryEventPublisher(logger))
    >>> response = dispatcher.dispatch(PlaceOrder(order_id=uuid4()))
"""

from command_dispatcher.application.commands import (
    Command,
    CommandHandler,
    CommandResponse,
)
from command_dispatcher.application.dispatching import (
    CommandDispatcher,
    CommandHandlerRegistry,
)
from command_dispatcher.core.errors import (
    DispatchError,
    HandlerAlreadyRegistered,
    HandlerNotFound,
    InvalidHandler,
)
from command_dispatcher.domain.events import DomainEvent
from command_dispatcher.infrastructure.events import InMemoryEventPublisher

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandDispatcher",
    "CommandHandler",
    "CommandHandlerRegistry",
    "CommandResponse",
    "DispatchError",
    "DomainEvent",
    "HandlerAlreadyRegistered",
    "HandlerNotFound",
    "InMemoryEventPublisher",
    "InvalidHandler",
]
