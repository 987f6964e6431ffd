"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Every entry carries ``logger=<name>`` so dispatcher output can be told apart
from other structlog users in the same process. Exceptions passed to
``error()``/``critical()`` are flattened into ``error_type``,
``error_message`` and, for dispatch errors, ``error_code``.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from command_dispatcher.core.errors import DispatchError

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def error_details(error: BaseException) -> dict[str, Any]:
    """Flatten an exception into structured log fields.

    The message falls back to a placeholder when the exception cannot be
    rendered, so logging a failure never raises a second one.
    """
    details: dict[str, Any] = {"error_type": type(error).__name__}
    if isinstance(error, DispatchError):
        details["error_code"] = error.code.value
        details["error_message"] = error.message
        return details

    try:
        details["error_message"] = str(error)
    except Exception:
        details["error_message"] = f"<unprintable {type(error).__name__}>"
    return details


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, ...), case-insensitive.
        name (str): Value of the ``logger`` field on every entry.

    Raises:
        ValueError: If level is not a standard level name.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        name: str = "command_dispatcher",
    ) -> None:
        level = level.upper()
        if level not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level {level!r}, expected one of {LEVEL_NAMES}")

        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._level = level
        self._name = name
        self._logger = structlog.get_logger(logger=name)

    @property
    def level(self) -> str:
        """Minimum level name this adapter emits."""
        return self._level

    @property
    def name(self) -> str:
        """Logger name attached to every entry."""
        return self._name

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (BaseException | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context.update(error_details(error))
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details."""
        if error is not None:
            context.update(error_details(error))
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        The bound adapter shares this adapter's structlog configuration,
        level and name.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._level = self._level
        bound_adapter._name = self._name
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context (alias for bind)."""
        return self.bind(**context)
