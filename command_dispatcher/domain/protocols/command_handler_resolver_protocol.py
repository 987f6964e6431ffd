"""Command handler resolver protocol (port).

Maps a command to the handler that executes it. The in-memory adapter is
``CommandHandlerRegistry``; containers or service locators can provide
their own implementation.
"""

from typing import Any, Protocol

from command_dispatcher.domain.protocols.command_handler_protocol import (
    CommandHandlerProtocol,
)


class CommandHandlerResolverProtocol(Protocol):
    """Protocol for command handler resolvers."""

    def resolve(self, command: Any) -> CommandHandlerProtocol:
        """Return the handler for ``command``.

        Args:
            command: Command being dispatched.

        Returns:
            Handler to invoke with the command.

        Raises:
            HandlerNotFound: If no handler matches the command.
        """
        ...
