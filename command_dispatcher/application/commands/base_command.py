"""Command base class (CQRS write intent).

Commands represent intent to change state. They are immutable data
containers: handlers execute the logic.

Pattern:
- frozen=True: a command cannot change while it is being dispatched
- kw_only=True: keyword arguments only, for clarity at call sites
- Commands are resolved by their exact class, so each intent gets its own class
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Command:
    """Base class for commands.

    Carries no fields: identity is the command's class plus whatever
    attributes the subclass declares. Dispatch does not require this base,
    any object can be dispatched.

    Example:
        >>> @dataclass(frozen=True, kw_only=True)
        ... class PlaceOrder(Command):
        ...     order_id: UUID
        ...     quantity: int
        >>>
        >>> response = dispatcher.dispatch(PlaceOrder(order_id=uuid4(), quantity=2))
    """
