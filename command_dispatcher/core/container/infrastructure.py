"""Infrastructure dependency factories.

Application-scoped singletons (lru_cache). Adapter selection is centralized
here (composition root) so callers only ever see protocols.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from command_dispatcher.core.config import settings

if TYPE_CHECKING:
    from command_dispatcher.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    - LOG_JSON overrides the renderer in every environment

    The returned logger is bound to ``app=<settings.app_name>``.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from command_dispatcher.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    logger = ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
    return logger.bind(app=settings.app_name)
