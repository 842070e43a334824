from __future__ import annotations

import logging
from collections.abc import Iterable

from address_book.core.common.exceptions import (
    DuplicatePersonError,
    PersonNotFoundError,
)
from address_book.core.domain.person import Person

logger = logging.getLogger(__name__)


class AddressBook:
    """Ordered list of unique persons.

    Uniqueness is decided by :meth:`Person.is_same_person`, so two records with
    the same name cannot coexist. Records are replaced in place to keep the
    list order stable.
    """

    def __init__(self, persons: Iterable[Person] | None = None) -> None:
        self._persons: list[Person] = []
        for person in persons or ():
            self.add_person(person)

    @property
    def persons(self) -> tuple[Person, ...]:
        """Read-only view of the stored persons."""
        return tuple(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(details={"name": str(person.name)})
        self._persons.append(person)
        logger.debug("Added person %s", person.name)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``.

        Raises:
            PersonNotFoundError: If ``target`` is not in the address book
            DuplicatePersonError: If ``edited`` is the same person as another entry
        """
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError(details={"name": str(target.name)}) from None

        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(details={"name": str(edited.name)})

        self._persons[index] = edited
        logger.debug("Replaced person %s", target.name)

    def remove_person(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError(details={"name": str(person.name)}) from None
        logger.debug("Removed person %s", person.name)
