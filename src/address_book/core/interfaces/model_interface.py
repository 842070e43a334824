from __future__ import annotations

from abc import ABC, abstractmethod

from address_book.core.domain.address_book import AddressBook
from address_book.core.domain.person import Person
from address_book.core.domain.predicates import PersonPredicate


class IModel(ABC):
    """In-memory state the commands operate on."""

    @abstractmethod
    def get_address_book(self) -> AddressBook:
        pass

    @abstractmethod
    def has_person(self, person: Person) -> bool:
        pass

    @abstractmethod
    def add_person(self, person: Person) -> None:
        pass

    @abstractmethod
    def delete_person(self, target: Person) -> None:
        pass

    @abstractmethod
    def set_person(self, target: Person, edited: Person) -> None:
        pass

    @abstractmethod
    def get_filtered_person_list(self) -> list[Person]:
        pass

    @abstractmethod
    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        pass
