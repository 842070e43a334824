from __future__ import annotations

from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.interfaces.model_interface import IModel


class ExitCommand(BaseCommand):
    """Terminates the interactive session."""

    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "Exit the program"

    async def execute(self, model: IModel) -> CommandResult:
        return CommandResult(
            name=self.name,
            success=True,
            message=self.MESSAGE_EXIT_ACKNOWLEDGEMENT,
            exit=True,
        )
