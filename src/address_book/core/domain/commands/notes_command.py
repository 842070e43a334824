"""
Notes command implementation.

Views, adds, or deletes the notes of a person identified by name. The person is
looked up in the currently shown list, and edits replace the stored record with
a copy whose notes differ.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import cast

from address_book.core.commands.cli_syntax import (
    PREFIX_ADD,
    PREFIX_DELETE,
    PREFIX_NOTES,
    PREFIX_VIEW,
)
from address_book.core.common.exceptions import CommandError
from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.person import Name, Notes, Person
from address_book.core.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class NotesMode(str, Enum):
    """What the notes command does with the target's notes."""

    VIEW = "view"
    ADD = "add"  # also replaces existing notes
    DELETE = "delete"


class NotesCommand(BaseCommand):
    """Domain command for viewing, adding, or deleting a person's notes."""

    COMMAND_WORD = "notes"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Views, adds, or deletes the notes of the person identified by their name.\n"
        "Parameters: \n"
        f"View: {PREFIX_VIEW}NAME\n"
        f"Add: {PREFIX_ADD}NAME {PREFIX_NOTES}NOTES\n"
        f"Delete: {PREFIX_DELETE}NAME\n"
        "Example: \n"
        f"{COMMAND_WORD} {PREFIX_VIEW}John Doe\n"
        f"{COMMAND_WORD} {PREFIX_ADD}John Doe {PREFIX_NOTES}Prefers email contact\n"
        f"{COMMAND_WORD} {PREFIX_DELETE}John Doe"
    )

    MESSAGE_VIEW_NOTES_SUCCESS = "Notes for {name}: {notes}"
    MESSAGE_DELETE_NOTES_SUCCESS = "Deleted notes for {name}"
    MESSAGE_ADD_NOTES_SUCCESS = "Added notes for {name}: {notes}"
    MESSAGE_PERSON_NOT_FOUND = "No person found with name: {name}"

    def __init__(
        self, target_name: Name, mode: NotesMode, notes: Notes | None = None
    ) -> None:
        """
        Create a notes command.

        Args:
            target_name: Exact name of the person whose notes are used
            mode: Whether to view, add, or delete notes
            notes: The notes to store; required for ``NotesMode.ADD``

        Raises:
            ValueError: If a required argument is missing
        """
        if target_name is None:
            raise ValueError("target_name must not be None")
        if mode is None:
            raise ValueError("mode must not be None")
        if mode is NotesMode.ADD and notes is None:
            raise ValueError("notes are required when adding notes")

        self._target_name = target_name
        self._mode = mode
        self._notes = notes

    @property
    def name(self) -> str:
        return self.COMMAND_WORD

    @property
    def format(self) -> str:
        return self.MESSAGE_USAGE

    @property
    def description(self) -> str:
        return "View, add, or delete the notes of a person"

    @property
    def examples(self) -> list[str]:
        return [
            f"{self.COMMAND_WORD} {PREFIX_VIEW}John Doe",
            f"{self.COMMAND_WORD} {PREFIX_ADD}John Doe {PREFIX_NOTES}Prefers email contact",
            f"{self.COMMAND_WORD} {PREFIX_DELETE}John Doe",
        ]

    @property
    def target_name(self) -> Name:
        return self._target_name

    @property
    def mode(self) -> NotesMode:
        return self._mode

    @property
    def notes(self) -> Notes | None:
        return self._notes

    async def execute(self, model: IModel) -> CommandResult:
        person_to_edit = self._find_person(model)
        if person_to_edit is None:
            raise CommandError(
                self.MESSAGE_PERSON_NOT_FOUND.format(name=self._target_name),
                details={"name": str(self._target_name), "mode": self._mode.value},
            )

        logger.debug("Executing notes %s for %s", self._mode.value, person_to_edit.name)

        if self._mode is NotesMode.VIEW:
            return CommandResult(
                name=self.name,
                success=True,
                message=self.MESSAGE_VIEW_NOTES_SUCCESS.format(
                    name=person_to_edit.name, notes=person_to_edit.notes
                ),
                data={"notes": str(person_to_edit.notes)},
            )

        if self._mode is NotesMode.DELETE:
            model.set_person(person_to_edit, person_to_edit.with_notes(Notes.empty()))
            return CommandResult(
                name=self.name,
                success=True,
                message=self.MESSAGE_DELETE_NOTES_SUCCESS.format(
                    name=person_to_edit.name
                ),
            )

        # ADD; the constructor guarantees notes are present
        notes = cast(Notes, self._notes)
        model.set_person(person_to_edit, person_to_edit.with_notes(notes))
        return CommandResult(
            name=self.name,
            success=True,
            message=self.MESSAGE_ADD_NOTES_SUCCESS.format(
                name=person_to_edit.name, notes=notes
            ),
            data={"notes": str(notes)},
        )

    def _find_person(self, model: IModel) -> Person | None:
        for person in model.get_filtered_person_list():
            if person.name == self._target_name:
                return person
        return None
