from __future__ import annotations

from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.predicates import show_all_persons
from address_book.core.interfaces.model_interface import IModel


class ListCommand(BaseCommand):
    """Lists all persons in the address book."""

    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all persons in the address book."
    MESSAGE_SUCCESS = "Listed all persons"

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "List all persons"

    async def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        persons = model.get_filtered_person_list()
        lines = [self.MESSAGE_SUCCESS]
        lines.extend(f"{index}. {person}" for index, person in enumerate(persons, 1))
        return CommandResult(
            name=self.name,
            success=True,
            message="\n".join(lines),
            data={"count": len(persons)},
        )
