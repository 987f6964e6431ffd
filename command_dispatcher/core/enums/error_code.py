"""Dispatch error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention and are carried by every
DispatchError so callers can branch on a stable value instead of the message.
"""

from enum import Enum


class ErrorCode(Enum):
    """Dispatch error codes (machine-readable)."""

    # Resolution errors
    HANDLER_NOT_FOUND = "handler_not_found"

    # Registration errors
    HANDLER_INVALID = "handler_invalid"
    HANDLER_ALREADY_REGISTERED = "handler_already_registered"
