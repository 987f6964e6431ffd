"""Command response.

What a handler hands back to the dispatcher: an acknowledgement flag and
the domain events raised while executing the command.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class CommandResponse:
    """Handler response carrying an ack flag and optional domain events.

    Attributes:
        ack: True when the command was accepted and executed.
        events: Events to publish, in order. None means "no events".

    Example:
        >>> return CommandResponse(events=[OrderPlaced(order_id=cmd.order_id)])
        >>> return CommandResponse(ack=False)
    """

    ack: bool = True
    events: Sequence[Any] | None = None

    def __post_init__(self) -> None:
        if self.events is not None:
            # Freeze the caller's list so the response stays immutable
            object.__setattr__(self, "events", tuple(self.events))

    def is_ok(self) -> bool:
        """Return True when the command was acknowledged."""
        return self.ack

    def get_events(self) -> Sequence[Any] | None:
        """Return the events raised by the handler, or None."""
        return self.events
