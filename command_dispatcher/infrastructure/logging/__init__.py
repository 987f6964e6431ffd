"""Logging adapters implementing LoggerProtocol."""

from command_dispatcher.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
