"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from command_dispatcher.core.enums import ErrorCode, Environment
"""

from command_dispatcher.core.enums.environment import Environment
from command_dispatcher.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
