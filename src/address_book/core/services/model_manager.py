from __future__ import annotations

import logging

from address_book.core.domain.address_book import AddressBook
from address_book.core.domain.person import Person
from address_book.core.domain.predicates import PersonPredicate, show_all_persons
from address_book.core.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class ModelManager(IModel):
    """In-memory implementation of the model.

    The model keeps the address book together with the predicate that decides
    which persons are currently shown. It does not persist anything.
    """

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._address_book = address_book if address_book is not None else AddressBook()
        self._predicate: PersonPredicate = show_all_persons
        logger.debug(
            "Initialized model with %d persons", len(self._address_book)
        )

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(show_all_persons)

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    def get_filtered_person_list(self) -> list[Person]:
        return [p for p in self._address_book.persons if self._predicate(p)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate
