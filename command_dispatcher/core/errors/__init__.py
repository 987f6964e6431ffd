"""Core errors package.

Usage:
    from command_dispatcher.core.errors import HandlerNotFound
"""

from command_dispatcher.core.errors.dispatch_error import (
    DispatchError,
    HandlerAlreadyRegistered,
    HandlerNotFound,
    InvalidHandler,
)

__all__ = [
    "DispatchError",
    "HandlerNotFound",
    "InvalidHandler",
    "HandlerAlreadyRegistered",
]
