"""Domain protocols (ports).

Structural interfaces consumed by the dispatcher. Adapters implement them
without inheriting from them.
"""

from command_dispatcher.domain.protocols.command_handler_protocol import (
    CommandHandlerProtocol,
    HandlesCommandsProtocol,
)
from command_dispatcher.domain.protocols.command_handler_resolver_protocol import (
    CommandHandlerResolverProtocol,
)
from command_dispatcher.domain.protocols.command_response_protocol import (
    CommandResponseProtocol,
)
from command_dispatcher.domain.protocols.event_publisher_protocol import (
    EventPublisherProtocol,
)
from command_dispatcher.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CommandHandlerProtocol",
    "CommandHandlerResolverProtocol",
    "CommandResponseProtocol",
    "EventPublisherProtocol",
    "HandlesCommandsProtocol",
    "LoggerProtocol",
]
