"""Command handler registry - explicit command-class to handler mapping.

In-memory implementation of CommandHandlerResolverProtocol. Resolution is a
dictionary lookup on the command's exact class: no subclass walking and no
inspection of handler signatures. Handlers are registered up front, either
as instances or as zero-argument factories that build the handler on first
use.

Usage:
    >>> registry = CommandHandlerRegistry(logger=logger)
    >>> registry.register(PlaceOrder, place_order_handler)
    >>> registry.register_factory(CancelOrder, lambda: CancelOrderHandler(repo))
    >>> registry.register_handler(ShipOrderHandler())  # uses handled_commands
    >>>
    >>> handler = registry.resolve(PlaceOrder(order_id=uuid4()))
"""

from collections.abc import Callable
from typing import Any

from command_dispatcher.core.errors import (
    HandlerAlreadyRegistered,
    HandlerNotFound,
    InvalidHandler,
)
from command_dispatcher.domain.protocols.command_handler_protocol import (
    CommandHandlerProtocol,
    HandlesCommandsProtocol,
)
from command_dispatcher.domain.protocols.logger_protocol import LoggerProtocol

HandlerFactory = Callable[[], CommandHandlerProtocol]


def handler_name(handler: Any) -> str:
    """Return a readable name for a handler (function or callable object)."""
    return getattr(handler, "__qualname__", None) or type(handler).__qualname__


class CommandHandlerRegistry:
    """Resolver backed by a command-class to handler mapping.

    Attributes:
        _handlers: Resolved handler instances keyed by command class.
        _factories: Pending factories keyed by command class. A factory is
            removed once it has produced a callable handler; a factory
            that raises stays registered.
        _logger: Logger for registrations.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize an empty registry.

        Args:
            logger: Structured logger. Defaults to the container logger.
        """
        if logger is None:
            from command_dispatcher.core.container import get_logger

            logger = get_logger()

        self._handlers: dict[type, CommandHandlerProtocol] = {}
        self._factories: dict[type, HandlerFactory] = {}
        self._logger = logger

    def register(
        self,
        command_type: type,
        handler: CommandHandlerProtocol,
        *,
        replace: bool = False,
    ) -> None:
        """Register a handler instance for a command class.

        Args:
            command_type: Exact command class the handler executes.
            handler: Callable invoked with the command.
            replace: Overwrite an existing registration instead of failing.

        Raises:
            InvalidHandler: If handler is not callable.
            HandlerAlreadyRegistered: If command_type already has a handler
                and replace is False.
        """
        if not callable(handler):
            raise InvalidHandler(handler, "handler must be callable")
        self._check_free(command_type, replace)

        self._factories.pop(command_type, None)
        self._handlers[command_type] = handler

        self._logger.info(
            "command_handler_registered",
            command_type=command_type.__name__,
            handler=handler_name(handler),
            lazy=False,
        )

    def register_factory(
        self,
        command_type: type,
        factory: HandlerFactory,
        *,
        replace: bool = False,
    ) -> None:
        """Register a factory building the handler on first resolution.

        The factory runs on first resolution and its handler is cached. If it
        raises or returns a non-callable, it stays registered and runs again
        on the next resolution.

        Raises:
            InvalidHandler: If factory is not callable.
            HandlerAlreadyRegistered: If command_type is taken and replace is False.
        """
        if not callable(factory):
            raise InvalidHandler(factory, "handler factory must be callable")
        self._check_free(command_type, replace)

        self._handlers.pop(command_type, None)
        self._factories[command_type] = factory

        self._logger.info(
            "command_handler_registered",
            command_type=command_type.__name__,
            handler=handler_name(factory),
            lazy=True,
        )

    def register_handler(
        self,
        handler: HandlesCommandsProtocol,
        *,
        replace: bool = False,
    ) -> None:
        """Register a handler for every class listed in its handled_commands.

        Raises:
            InvalidHandler: If handler declares no handled commands.
            HandlerAlreadyRegistered: If one of the classes is taken and
                replace is False. Nothing is registered in that case.
        """
        handled = tuple(getattr(handler, "handled_commands", None) or ())
        if not handled:
            raise InvalidHandler(handler, "handler declares no handled_commands")

        if not replace:
            for command_type in handled:
                self._check_free(command_type, replace)

        for command_type in handled:
            self.register(command_type, handler, replace=True)

    def resolve(self, command: Any) -> CommandHandlerProtocol:
        """Return the handler registered for the command's class.

        Args:
            command: Command being dispatched.

        Returns:
            Registered handler.

        Raises:
            HandlerNotFound: If nothing is registered for type(command).
            InvalidHandler: If a pending factory returns a non-callable.
        """
        command_type = type(command)

        handler = self._handlers.get(command_type)
        if handler is not None:
            return handler

        factory = self._factories.get(command_type)
        if factory is None:
            raise HandlerNotFound.for_command(command)

        # Factory stays registered until it produces a usable handler
        handler = factory()
        if not callable(handler):
            raise InvalidHandler(handler, "handler factory returned a non-callable")
        del self._factories[command_type]
        self._handlers[command_type] = handler
        return handler

    def has_handler(self, command_type: type) -> bool:
        """Check if a handler (or factory) is registered for command_type."""
        return command_type in self._handlers or command_type in self._factories

    def registered_commands(self) -> list[type]:
        """Return every registered command class (resolved first, then pending)."""
        return [*self._handlers, *self._factories]

    def __contains__(self, command_type: object) -> bool:
        return isinstance(command_type, type) and self.has_handler(command_type)

    def __len__(self) -> int:
        return len(self._handlers) + len(self._factories)

    def _check_free(self, command_type: type, replace: bool) -> None:
        if not replace and self.has_handler(command_type):
            raise HandlerAlreadyRegistered(command_type)
