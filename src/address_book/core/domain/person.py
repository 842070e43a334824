"""
Person domain model.

A person is an immutable record of validated field values. Edits produce a new
record through ``model_copy`` so that the address book can swap the old record
for the new one.
"""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import Field, field_validator

from address_book.core.domain.base import SingleValueObject, ValueObject

_ALNUM_WORDS = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE = re.compile(r"[0-9]{3,}")
_EMAIL = re.compile(
    r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
    r"@(?:[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*\.)*"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])"
)
_ADDRESS = re.compile(r"\S.*", re.DOTALL)
_TAG = re.compile(r"[A-Za-z0-9]+")
_INCOME = re.compile(r"[0-9]+(?:\.[0-9]{1,2})?")
_AGE = re.compile(r"[0-9]{1,3}")

MAX_AGE = 150


class Name(SingleValueObject):
    """A person's name. Names are compared exactly, case included."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    value: str

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_ALNUM_WORDS.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v


class Phone(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_PHONE.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v


class Email(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain. The local-part should "
        "only contain alphanumeric characters and the special characters +_.- "
        "(not at the start or end), and the domain should end with a label that "
        "is at least 2 characters long"
    )

    value: str

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_EMAIL.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v


class Address(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    value: str

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_ADDRESS.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v


class Notes(SingleValueObject):
    """Free-text notes about a person. Empty text means no notes."""

    value: str = ""

    @classmethod
    def empty(cls) -> Notes:
        return cls(value="")

    def is_empty(self) -> bool:
        return not self.value


class Tag(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"

    value: str

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_TAG.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return f"[{self.value}]"


class Income(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Income should be a non-negative number with at most 2 decimal places"
    )

    value: float

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_INCOME.fullmatch(text))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: float) -> float:
        if v < 0:
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return f"{self.value:.2f}"


class Age(SingleValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        f"Age should be a whole number between 0 and {MAX_AGE}"
    )

    value: int

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(_AGE.fullmatch(text)) and int(text) <= MAX_AGE

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        if not 0 <= v <= MAX_AGE:
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v


class Person(ValueObject):
    """Immutable contact record."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    notes: Notes = Field(default_factory=Notes.empty)
    tags: frozenset[Tag] = Field(default_factory=frozenset)
    income: Income
    age: Age

    def with_notes(self, notes: Notes) -> Person:
        """Create a new person with updated notes."""
        return self.model_copy(update={"notes": notes})

    def is_same_person(self, other: Person | None) -> bool:
        """Return True if both records describe the same person.

        Identity is the name; two records with the same name but different
        details still count as the same person.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda tag: tag.value)

    def __str__(self) -> str:
        parts = [
            str(self.name),
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
            f"Income: {self.income}",
            f"Age: {self.age}",
        ]
        if not self.notes.is_empty():
            parts.append(f"Notes: {self.notes}")
        if self.tags:
            parts.append("Tags: " + "".join(str(tag) for tag in self.sorted_tags()))
        return "; ".join(parts)
