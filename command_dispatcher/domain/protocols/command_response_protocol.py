"""Command response protocol.

Responses are opaque to the dispatcher except for one optional accessor:
``get_events()``, queried only when an event publisher is configured.
"""

from collections.abc import Sequence
from typing import Any, Protocol


class CommandResponseProtocol(Protocol):
    """Response that may carry domain events."""

    def get_events(self) -> Sequence[Any] | None:
        """Return the events raised while handling the command.

        Returns:
            Ordered events, or None / an empty sequence when there are none.
        """
        ...
