"""Core shared kernel.

This module provides foundational pieces used across all layers:
- Environment and error code enums
- Dispatch exception hierarchy
- Settings (pydantic-settings)

The core module has NO dependencies on other package layers.
"""

from command_dispatcher.core.enums import Environment, ErrorCode
from command_dispatcher.core.errors import (
    DispatchError,
    HandlerAlreadyRegistered,
    HandlerNotFound,
    InvalidHandler,
)

__all__ = [
    "DispatchError",
    "Environment",
    "ErrorCode",
    "HandlerAlreadyRegistered",
    "HandlerNotFound",
    "InvalidHandler",
]
