from __future__ import annotations

from collections.abc import Sequence

from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.interfaces.model_interface import IModel


class HelpCommand(BaseCommand):
    """Shows the usage of every registered command."""

    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions."
    MESSAGE_HEADER = "Available commands:"

    def __init__(self, usages: Sequence[str] = ()) -> None:
        self._usages = tuple(usages)

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "Show help information"

    async def execute(self, model: IModel) -> CommandResult:
        sections = [self.MESSAGE_HEADER, *self._usages]
        return CommandResult(
            name=self.name, success=True, message="\n\n".join(sections)
        )
