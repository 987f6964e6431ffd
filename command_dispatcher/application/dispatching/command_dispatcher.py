"""Command dispatcher.

Flow:
1. Resolve the handler for the command (resolver)
2. Invoke the handler with the command
3. If an event publisher is configured, publish every event carried by the
   response, one call per event, in order
4. Return the handler's response unchanged

Error policy:
- HandlerNotFound from the resolver, handler exceptions and publisher
  exceptions all reach the caller unchanged (same exception object)
- Publishing is sequential and fail-fast: after a publish failure the
  remaining events of that response are not published
- No retries, no partial-failure recovery

Architecture:
- Collaborators are typed against domain protocols; when no logger is
  injected, the container logger is looked up lazily at construction
- Collaborators are injected at construction and never reassigned
"""

from contextlib import suppress
from typing import Any

from command_dispatcher.application.dispatching.handler_registry import handler_name
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


class CommandDispatcher:
    """Dispatches commands to their handlers and forwards resulting events.

    Synchronous, single-threaded. Each dispatch performs exactly one handler
    resolution and one handler invocation.

    Example:
        >>> dispatcher = CommandDispatcher(registry, event_publisher)
        >>> response = dispatcher.dispatch(PlaceOrder(order_id=uuid4()))
        >>> response.is_ok()
        True
    """

    def __init__(
        self,
        resolver: CommandHandlerResolverProtocol,
        event_publisher: EventPublisherProtocol | None = None,
        *,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize dispatcher with its collaborators.

        Args:
            resolver: Maps a command to its handler.
            event_publisher: Receives the events carried by responses. When
                None, responses are never asked for their events.
            logger: Structured logger. Defaults to the container logger.
        """
        if logger is None:
            from command_dispatcher.core.container import get_logger

            logger = get_logger()

        self._resolver = resolver
        self._event_publisher = event_publisher
        self._logger = logger

    @property
    def resolver(self) -> CommandHandlerResolverProtocol:
        """Resolver used to find handlers."""
        return self._resolver

    @property
    def event_publisher(self) -> EventPublisherProtocol | None:
        """Configured event publisher, or None."""
        return self._event_publisher

    def dispatch(self, command: Any) -> Any:
        """Dispatch a command and return the handler's response.

        Args:
            command: Command to execute.

        Returns:
            The exact response object returned by the handler.

        Raises:
            HandlerNotFound: If the resolver has no handler for the command.
            Exception: Anything raised by the handler or the event publisher,
                unchanged.
        """
        command_type = type(command).__name__
        self._logger.debug("command_dispatching", command_type=command_type)

        try:
            handler = self._resolver.resolve(command)
            response = handler(command)
            published = self._publish_events(response)
        except Exception as exc:
            # The failure log must never replace the exception being re-raised
            with suppress(Exception):
                self._logger.warning(
                    "command_dispatch_failed",
                    command_type=command_type,
                    error_type=type(exc).__name__,
                )
            raise

        self._logger.debug(
            "command_dispatched",
            command_type=command_type,
            handler=handler_name(handler),
            event_count=published,
        )
        return response

    def _publish_events(self, response: CommandResponseProtocol) -> int:
        """Publish the response's events and return how many were published."""
        if self._event_publisher is None:
            return 0

        events = response.get_events()
        if not events:
            return 0

        published = 0
        for event in events:
            self._event_publisher.publish(event)
            published += 1
        return published
