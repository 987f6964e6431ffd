"""Command handler base class.

Optional convenience base: subclasses implement ``handle`` and list the
command classes they accept in ``handled_commands``. Instances are
callable, which is all the dispatcher requires of a handler.

Example:
    >>> class PlaceOrderHandler(CommandHandler):
    ...     handled_commands = (PlaceOrder,)
    ...
    ...     def __init__(self, repository: OrderRepository) -> None:
    ...         self._repository = repository
    ...
    ...     def handle(self, command: PlaceOrder) -> CommandResponse:
    ...         self._repository.save(command.order_id)
    ...         return CommandResponse(events=[OrderPlaced(order_id=command.order_id)])
    >>>
    >>> registry.register_handler(PlaceOrderHandler(repository))
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar


class CommandHandler(ABC):
    """Base class for class-based command handlers."""

    handled_commands: ClassVar[Sequence[type]] = ()

    @abstractmethod
    def handle(self, command: Any) -> Any:
        """Execute the command and return a response."""

    def __call__(self, command: Any) -> Any:
        return self.handle(command)
