from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from address_book.core.domain.person import Person

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {word.lower() for word in str(person.name).split()}
        return any(keyword.lower() in words for keyword in self.keywords)
