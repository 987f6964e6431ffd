"""In-memory event publisher implementation.

Implements EventPublisherProtocol with a dictionary-based subscriber
registry. Suitable for single-process use; a broker-backed publisher only
needs to expose the same ``publish(event)`` method.

Architecture:
    - Dictionary-based registry (event class → list of subscribers)
    - Exact-class routing (no inheritance matching)
    - Sequential execution in subscription order
    - Fail-fast by default; fail-open (log and continue) when configured

Usage:
    >>> publisher = InMemoryEventPublisher(logger=get_logger())
    >>> publisher.subscribe(OrderPlaced, send_confirmation_email)
    >>> publisher.publish(OrderPlaced(order_id=uuid4()))
"""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from command_dispatcher.domain.protocols.logger_protocol import LoggerProtocol
from command_dispatcher.infrastructure.logging.console_adapter import error_details

EventSubscriber = Callable[[Any], None]
"""Plain callable receiving one event. Return value is ignored."""


class InMemoryEventPublisher:
    """In-memory event publisher with sequential, ordered delivery.

    Thread Safety:
        - NOT thread-safe (single-threaded, synchronous design)

    Attributes:
        _subscribers: Event class to subscribers, in subscription order.
        _fail_open: When True, subscriber failures are logged and the
            remaining subscribers still run. When False, the first failure
            propagates to the publisher's caller.
        _logger: Logger for publishing and subscriber failures.
    """

    def __init__(self, logger: LoggerProtocol, *, fail_open: bool = False) -> None:
        """Initialize publisher.

        Args:
            logger: Logger for event publishing (debug) and subscriber
                failures (warning, fail-open mode only).
            fail_open: Keep delivering to later subscribers after a failure.
        """
        self._subscribers: dict[type, list[EventSubscriber]] = defaultdict(list)
        self._fail_open = fail_open
        self._logger = logger

    @property
    def fail_open(self) -> bool:
        """Whether subscriber failures are swallowed and logged."""
        return self._fail_open

    def subscribe(self, event_type: type, subscriber: EventSubscriber) -> None:
        """Register a subscriber for an exact event class.

        Args:
            event_type: Class of event to receive.
            subscriber: Callable invoked with each published event of that
                class. No duplicate detection.

        Raises:
            TypeError: If subscriber is not callable.
        """
        if not callable(subscriber):
            raise TypeError(f"Event subscriber must be callable, got {subscriber!r}")
        self._subscribers[event_type].append(subscriber)

    def subscriber_count(self, event_type: type) -> int:
        """Number of subscribers registered for event_type."""
        return len(self._subscribers.get(event_type, ()))

    def publish(self, event: Any) -> None:
        """Deliver event to every subscriber of its class, in order.

        No subscribers = no-op (not an error).

        Args:
            event: Event to deliver.

        Raises:
            Exception: The first subscriber failure, unless fail_open is set.
        """
        event_type = type(event)
        subscribers = list(self._subscribers.get(event_type, ()))

        if not subscribers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(getattr(event, "event_id", "")),
            subscriber_count=len(subscribers),
        )

        for subscriber in subscribers:
            if not self._fail_open:
                subscriber(event)
                continue

            try:
                subscriber(event)
            except Exception as exc:
                self._logger.warning(
                    "event_subscriber_failed",
                    event_type=event_type.__name__,
                    event_id=str(getattr(event, "event_id", "")),
                    subscriber=getattr(
                        subscriber, "__qualname__", type(subscriber).__qualname__
                    ),
                    exc_info=exc,
                    **error_details(exc),
                )
