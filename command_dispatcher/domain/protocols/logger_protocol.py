"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the package while remaining
backend-agnostic. Every call is a short event-style message plus key/value
context.

Log Levels:
    - DEBUG: Per-dispatch diagnostics (resolution, event counts)
    - INFO: Registration and wiring
    - WARNING: Failed dispatches, failed subscribers in fail-open mode
    - ERROR / CRITICAL: Reserved for callers

Usage:
    from command_dispatcher.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.debug("command_dispatching", command_type="PlaceOrder")

    scoped = logger.bind(component="dispatcher")
    scoped.info("command_handler_registered")  # component auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports 5 standard log levels and context binding for scoped loggers.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event-style message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event-style message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
