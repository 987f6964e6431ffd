"""Command handler protocol.

A handler is a single-capability object: call it with a command, get a
response back. Plain functions, lambdas and objects defining ``__call__``
all qualify.

Handlers that want to be registered through
``CommandHandlerRegistry.register_handler`` additionally expose the
command classes they handle (see HandlesCommandsProtocol).
"""

from collections.abc import Sequence
from typing import Any, Protocol


class CommandHandlerProtocol(Protocol):
    """Callable that executes a command and returns a response."""

    def __call__(self, command: Any) -> Any:
        """Execute the command.

        Args:
            command: Command to execute.

        Returns:
            Handler response (typically a CommandResponse).
        """
        ...


class HandlesCommandsProtocol(Protocol):
    """Handler that declares which command classes it handles."""

    handled_commands: Sequence[type]

    def __call__(self, command: Any) -> Any:
        """Execute the command."""
        ...
