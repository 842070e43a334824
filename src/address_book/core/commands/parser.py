"""
Parses user input lines into commands.
"""

from __future__ import annotations

import importlib
import logging
import re

from address_book.constants import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from address_book.core.commands.registry import (
    CommandParserRegistry,
    command_parser_registry,
)
from address_book.core.common.exceptions import ParseError
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.commands.help_command import HelpCommand

logger = logging.getLogger(__name__)

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class AddressBookParser:
    """Splits a line into command word and arguments and dispatches to the
    parser registered for that command word."""

    def __init__(self, registry: CommandParserRegistry | None = None) -> None:
        self._registry = registry or command_parser_registry
        if registry is None:
            self._import_command_parsers()

    def _import_command_parsers(self) -> None:
        """Import the parser package so that registration runs."""
        importlib.import_module("address_book.core.commands.parsers")

    @property
    def registry(self) -> CommandParserRegistry:
        return self._registry

    def parse_command(self, user_input: str) -> BaseCommand:
        """
        Parse a line of user input.

        Args:
            user_input: Full line typed by the user

        Returns:
            The command ready for execution

        Raises:
            ParseError: If the line is blank, names an unknown command, or has
                arguments the command's parser rejects
        """
        matcher = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            raise ParseError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(usage=HelpCommand.MESSAGE_USAGE)
            )

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")

        if not self._registry.has_command(command_word):
            logger.debug("Unknown command word: %s", command_word)
            raise ParseError(
                MESSAGE_UNKNOWN_COMMAND, details={"command_word": command_word}
            )

        return self._registry.get_command_factory(command_word)(arguments)
