"""Command building blocks: base command, response and handler."""

from command_dispatcher.application.commands.base_command import Command
from command_dispatcher.application.commands.command_handler import CommandHandler
from command_dispatcher.application.commands.command_response import CommandResponse

__all__ = ["Command", "CommandHandler", "CommandResponse"]
