from __future__ import annotations

from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.predicates import NameContainsKeywordsPredicate
from address_book.core.interfaces.model_interface import IModel


class FindCommand(BaseCommand):
    """
    Shows only the persons whose names contain any of the given keywords.
    Keyword matching is case insensitive and works on whole words.
    """

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )
    MESSAGE_PERSONS_LISTED = "{count} persons listed!"

    def __init__(self, predicate: NameContainsKeywordsPredicate) -> None:
        self._predicate = predicate

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "Find persons by name keywords"

    async def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(self._predicate)
        persons = model.get_filtered_person_list()
        lines = [self.MESSAGE_PERSONS_LISTED.format(count=len(persons))]
        lines.extend(f"{index}. {person}" for index, person in enumerate(persons, 1))
        return CommandResult(
            name=self.name,
            success=True,
            message="\n".join(lines),
            data={"count": len(persons)},
        )
