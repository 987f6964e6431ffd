"""Dispatching: the dispatcher and the in-memory handler registry."""

from command_dispatcher.application.dispatching.command_dispatcher import (
    CommandDispatcher,
)
from command_dispatcher.application.dispatching.handler_registry import (
    CommandHandlerRegistry,
)

__all__ = ["CommandDispatcher", "CommandHandlerRegistry"]
