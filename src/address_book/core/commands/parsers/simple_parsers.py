"""
Parsers for commands that take no arguments. Trailing text is ignored.
"""

from __future__ import annotations

from address_book.core.commands.registry import command_parser_registry
from address_book.core.domain.commands.exit_command import ExitCommand
from address_book.core.domain.commands.help_command import HelpCommand
from address_book.core.domain.commands.list_command import ListCommand


def parse_list(args: str) -> ListCommand:
    return ListCommand()


def parse_exit(args: str) -> ExitCommand:
    return ExitCommand()


def parse_help(args: str) -> HelpCommand:
    return HelpCommand(command_parser_registry.get_usages())


command_parser_registry.register_command(
    ListCommand.COMMAND_WORD, parse_list, ListCommand.MESSAGE_USAGE
)
command_parser_registry.register_command(
    HelpCommand.COMMAND_WORD, parse_help, HelpCommand.MESSAGE_USAGE
)
command_parser_registry.register_command(
    ExitCommand.COMMAND_WORD, parse_exit, ExitCommand.MESSAGE_USAGE
)
