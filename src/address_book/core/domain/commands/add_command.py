from __future__ import annotations

import logging

from address_book.core.commands.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_AGE,
    PREFIX_EMAIL,
    PREFIX_INCOME,
    PREFIX_NAME,
    PREFIX_NOTES,
    PREFIX_PHONE,
    PREFIX_TAG,
)
from address_book.core.common.exceptions import CommandError
from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.person import Person
from address_book.core.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class AddCommand(BaseCommand):
    """Adds a person to the address book."""

    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Parameters: "
        f"{PREFIX_NAME}NAME "
        f"{PREFIX_PHONE}PHONE "
        f"{PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS "
        f"{PREFIX_INCOME}INCOME "
        f"{PREFIX_AGE}AGE "
        f"[{PREFIX_NOTES}NOTES] "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} "
        f"{PREFIX_NAME}John Doe "
        f"{PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com "
        f"{PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 "
        f"{PREFIX_INCOME}5000 "
        f"{PREFIX_AGE}35 "
        f"{PREFIX_TAG}friends "
        f"{PREFIX_TAG}owesMoney"
    )

    MESSAGE_SUCCESS = "New person added: {person}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(self, person: Person) -> None:
        if person is None:
            raise ValueError("person must not be None")
        self._person = person

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "Add a person to the address book"

    async def execute(self, model: IModel) -> CommandResult:
        if model.has_person(self._person):
            raise CommandError(
                self.MESSAGE_DUPLICATE_PERSON,
                details={"name": str(self._person.name)},
            )

        model.add_person(self._person)
        logger.info("Added person %s", self._person.name)
        return CommandResult(
            name=self.name,
            success=True,
            message=self.MESSAGE_SUCCESS.format(person=self._person),
        )
