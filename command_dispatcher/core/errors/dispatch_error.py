"""Dispatch error hierarchy.

Unlike result-style domain errors, these are raised: a failed dispatch must
surface to the caller with no response returned. The dispatcher itself never
catches, wraps or translates them.

Hierarchy:
    DispatchError (Exception)
    ├── HandlerNotFound (also LookupError)
    ├── InvalidHandler (also TypeError)
    └── HandlerAlreadyRegistered (also ValueError)
"""

from typing import Any

from command_dispatcher.core.enums import ErrorCode


def _type_name(command_type: Any) -> str:
    return getattr(command_type, "__qualname__", None) or repr(command_type)


class DispatchError(Exception):
    """Base class for errors raised by the dispatch layer.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
    """

    code: ErrorCode

    def __init__(self, message: str, *, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


class HandlerNotFound(DispatchError, LookupError):
    """Raised by a resolver when no handler matches the command.

    Attributes:
        command_type: Class of the command that could not be resolved.
    """

    def __init__(self, command_type: type, message: str | None = None) -> None:
        super().__init__(
            message or f"No handler registered for command {_type_name(command_type)}",
            code=ErrorCode.HANDLER_NOT_FOUND,
        )
        self.command_type = command_type

    @classmethod
    def for_command(cls, command: object) -> "HandlerNotFound":
        """Build the error for a concrete command instance."""
        return cls(type(command))


class InvalidHandler(DispatchError, TypeError):
    """Raised when an object registered as a handler cannot handle commands."""

    def __init__(self, handler: object, reason: str) -> None:
        super().__init__(
            f"Invalid command handler {handler!r}: {reason}",
            code=ErrorCode.HANDLER_INVALID,
        )
        self.handler = handler


class HandlerAlreadyRegistered(DispatchError, ValueError):
    """Raised when a command type already has a handler and replace is off."""

    def __init__(self, command_type: type) -> None:
        super().__init__(
            f"A handler is already registered for command {_type_name(command_type)}",
            code=ErrorCode.HANDLER_ALREADY_REGISTERED,
        )
        self.command_type = command_type
