"""
Global registry for command parsers.

Each parser module registers the command word it handles together with a
factory that turns the argument string into a command, and the usage text
shown by ``help``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from address_book.core.domain.commands.base_command import BaseCommand

logger = logging.getLogger(__name__)

CommandFactory = Callable[[str], "BaseCommand"]


@dataclass(frozen=True)
class RegisteredCommand:
    name: str
    factory: CommandFactory
    usage: str


class CommandParserRegistry:
    """
    Registry for command parsers keyed by command word.
    """

    def __init__(self) -> None:
        """Initialize the command parser registry."""
        self._commands: dict[str, RegisteredCommand] = {}

    def register_command(
        self, name: str, factory: CommandFactory, usage: str = ""
    ) -> None:
        """
        Register a command parser.

        Args:
            name: The command word
            factory: A callable that parses the argument string into a command
            usage: Usage text listed by ``help``

        Raises:
            ValueError: If the command name is empty or already registered
            TypeError: If the factory is not callable
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Command name must be a non-empty string.")
        if not callable(factory):
            raise TypeError("Command factory must be a callable.")
        if name in self._commands:
            raise ValueError(f"Command '{name}' is already registered.")

        self._commands[name] = RegisteredCommand(name, factory, usage)
        logger.debug(f"Registered command parser: {name}")

    def get_command_factory(self, name: str) -> CommandFactory:
        """
        Get a command factory by command word.

        Raises:
            ValueError: If the command is not registered
        """
        registered = self._commands.get(name)
        if not registered:
            raise ValueError(f"Command '{name}' is not registered.")
        return registered.factory

    def get_registered_commands(self) -> list[str]:
        return list(self._commands.keys())

    def get_usages(self) -> list[str]:
        return [c.usage for c in self._commands.values() if c.usage]

    def has_command(self, name: str) -> bool:
        return name in self._commands


# Global instance of the registry
command_parser_registry = CommandParserRegistry()
