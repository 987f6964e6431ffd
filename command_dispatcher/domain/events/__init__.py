"""Domain events package."""

from command_dispatcher.domain.events.base_event import DomainEvent

__all__ = ["DomainEvent"]
