"""Unit tests for CommandHandlerRegistry.

Tests cover:
- Exact-class resolution (no subclass matching)
- HandlerNotFound for unknown commands
- Lazy factories (called once, cached)
- Registration through handled_commands declarations
- Duplicate registration and replace semantics
- Invalid handlers
- Factory failures leave the factory registered for retry
"""

from dataclasses import dataclass
from unittest.mock import MagicMock, patch

import pytest

from command_dispatcher.application.commands import (
    Command,
    CommandHandler,
    CommandResponse,
)
from command_dispatcher.application.dispatching.handler_registry import (
    CommandHandlerRegistry,
    handler_name,
)
from command_dispatcher.core.enums import ErrorCode
from command_dispatcher.core.errors import (
    HandlerAlreadyRegistered,
    HandlerNotFound,
    InvalidHandler,
)


@dataclass(frozen=True, kw_only=True)
class OpenTicket(Command):
    title: str = "printer on fire"


@dataclass(frozen=True, kw_only=True)
class UrgentOpenTicket(OpenTicket):
    pass


@dataclass(frozen=True, kw_only=True)
class CloseTicket(Command):
    ticket_id: int = 1


class TicketHandler(CommandHandler):
    handled_commands = (OpenTicket, CloseTicket)

    def handle(self, command):
        return CommandResponse()


def open_ticket(command: OpenTicket) -> CommandResponse:
    return CommandResponse()


@pytest.fixture
def registry(mock_logger):
    return CommandHandlerRegistry(logger=mock_logger)


@pytest.mark.unit
class TestCommandHandlerRegistryResolve:
    """Test handler resolution."""

    def test_resolve_returns_registered_handler(self, registry):
        """Test resolve() returns the exact handler registered for the class."""
        registry.register(OpenTicket, open_ticket)

        assert registry.resolve(OpenTicket()) is open_ticket

    def test_resolve_unknown_command_raises_handler_not_found(self, registry):
        """Test resolve() raises HandlerNotFound carrying the command class."""
        with pytest.raises(HandlerNotFound) as exc_info:
            registry.resolve(CloseTicket())

        assert exc_info.value.command_type is CloseTicket
        assert exc_info.value.code == ErrorCode.HANDLER_NOT_FOUND
        assert "CloseTicket" in str(exc_info.value)

    def test_resolve_does_not_match_subclasses(self, registry):
        """Test resolution uses the exact command class only."""
        registry.register(OpenTicket, open_ticket)

        with pytest.raises(HandlerNotFound):
            registry.resolve(UrgentOpenTicket())

    def test_handler_not_found_is_lookup_error(self, registry):
        """Test HandlerNotFound can be caught as LookupError."""
        with pytest.raises(LookupError):
            registry.resolve(object())


@pytest.mark.unit
class TestCommandHandlerRegistryFactories:
    """Test lazily built handlers."""

    def test_factory_called_on_first_resolve_only(self, registry):
        """Test factory runs once and its handler is cached."""
        handler = MagicMock()
        factory = MagicMock(return_value=handler)
        registry.register_factory(OpenTicket, factory)

        factory.assert_not_called()
        assert registry.resolve(OpenTicket()) is handler
        assert registry.resolve(OpenTicket()) is handler
        factory.assert_called_once_with()

    def test_factory_returning_non_callable_raises(self, registry):
        """Test a factory producing a non-callable is rejected at resolve time."""
        registry.register_factory(OpenTicket, lambda: "not a handler")

        with pytest.raises(InvalidHandler):
            registry.resolve(OpenTicket())

    def test_non_callable_factory_rejected(self, registry):
        """Test register_factory() validates the factory."""
        with pytest.raises(InvalidHandler):
            registry.register_factory(OpenTicket, 42)

    def test_pending_factory_counts_as_registered(self, registry):
        """Test has_handler() is True before the factory ran."""
        registry.register_factory(OpenTicket, lambda: open_ticket)

        assert registry.has_handler(OpenTicket)
        assert OpenTicket in registry
        assert len(registry) == 1

    def test_failing_factory_stays_registered(self, registry):
        """Test a factory that raises is retried on the next resolve."""
        # Arrange
        factory = MagicMock(
            side_effect=[ConnectionError("database unavailable"), open_ticket]
        )
        registry.register_factory(OpenTicket, factory)

        # Act
        with pytest.raises(ConnectionError):
            registry.resolve(OpenTicket())

        # Assert
        assert registry.has_handler(OpenTicket)
        assert len(registry) == 1
        assert registry.resolve(OpenTicket()) is open_ticket
        assert factory.call_count == 2

    def test_factory_error_propagates_unchanged(self, registry):
        """Test the factory's own exception object reaches the caller."""
        error = ConnectionError("database unavailable")
        registry.register_factory(OpenTicket, MagicMock(side_effect=error))

        with pytest.raises(ConnectionError) as exc_info:
            registry.resolve(OpenTicket())

        assert exc_info.value is error

    def test_non_callable_factory_result_keeps_factory(self, registry):
        """Test a rejected factory result leaves the factory registered."""
        factory = MagicMock(side_effect=["not a handler", open_ticket])
        registry.register_factory(OpenTicket, factory)

        with pytest.raises(InvalidHandler):
            registry.resolve(OpenTicket())

        assert registry.has_handler(OpenTicket)
        assert registry.resolve(OpenTicket()) is open_ticket


@pytest.mark.unit
class TestCommandHandlerRegistryRegistration:
    """Test registration rules."""

    def test_register_handler_uses_handled_commands(self, registry):
        """Test register_handler() maps every declared command class."""
        handler = TicketHandler()

        registry.register_handler(handler)

        assert registry.resolve(OpenTicket()) is handler
        assert registry.resolve(CloseTicket()) is handler
        assert registry.registered_commands() == [OpenTicket, CloseTicket]

    def test_register_handler_without_declaration_rejected(self, registry):
        """Test handlers declaring no commands cannot be auto-registered."""
        with pytest.raises(InvalidHandler) as exc_info:
            registry.register_handler(open_ticket)

        assert exc_info.value.code == ErrorCode.HANDLER_INVALID
        assert len(registry) == 0

    def test_register_handler_conflict_registers_nothing(self, registry):
        """Test a conflict on one declared class leaves the registry unchanged."""
        registry.register(CloseTicket, open_ticket)

        with pytest.raises(HandlerAlreadyRegistered):
            registry.register_handler(TicketHandler())

        assert not registry.has_handler(OpenTicket)
        assert registry.resolve(CloseTicket()) is open_ticket

    def test_duplicate_registration_rejected(self, registry):
        """Test registering twice for the same class fails without replace."""
        registry.register(OpenTicket, open_ticket)

        with pytest.raises(HandlerAlreadyRegistered) as exc_info:
            registry.register(OpenTicket, MagicMock())

        assert exc_info.value.command_type is OpenTicket
        assert isinstance(exc_info.value, ValueError)

    def test_replace_overwrites_handler(self, registry):
        """Test replace=True swaps the handler."""
        replacement = MagicMock()
        registry.register(OpenTicket, open_ticket)

        registry.register(OpenTicket, replacement, replace=True)

        assert registry.resolve(OpenTicket()) is replacement
        assert len(registry) == 1

    def test_replace_handler_with_factory(self, registry):
        """Test a factory can replace an instance registration."""
        replacement = MagicMock()
        registry.register(OpenTicket, open_ticket)

        registry.register_factory(OpenTicket, lambda: replacement, replace=True)

        assert registry.resolve(OpenTicket()) is replacement
        assert len(registry) == 1

    def test_non_callable_handler_rejected(self, registry):
        """Test register() rejects non-callables with InvalidHandler."""
        with pytest.raises(InvalidHandler) as exc_info:
            registry.register(OpenTicket, object())

        assert isinstance(exc_info.value, TypeError)

    def test_registration_is_logged(self, registry, mock_logger):
        """Test each registration emits command_handler_registered."""
        registry.register(OpenTicket, open_ticket)

        mock_logger.info.assert_called_once_with(
            "command_handler_registered",
            command_type="OpenTicket",
            handler="open_ticket",
            lazy=False,
        )

    def test_contains_ignores_non_types(self, registry):
        """Test membership checks only accept classes."""
        registry.register(OpenTicket, open_ticket)

        assert OpenTicket() not in registry

    def test_default_logger_comes_from_container(self):
        """Test the container logger is used when none is injected."""
        container_logger = MagicMock()
        with patch(
            "command_dispatcher.core.container.get_logger",
            return_value=container_logger,
        ):
            registry = CommandHandlerRegistry()

        registry.register(OpenTicket, open_ticket)

        container_logger.info.assert_called_once_with(
            "command_handler_registered",
            command_type="OpenTicket",
            handler="open_ticket",
            lazy=False,
        )


@pytest.mark.unit
class TestHandlerName:
    """Test handler_name() helper."""

    def test_function_uses_qualname(self):
        assert handler_name(open_ticket) == "open_ticket"

    def test_instance_uses_class_qualname(self):
        assert handler_name(TicketHandler()) == "TicketHandler"
