"""
Helpers that turn raw argument text into validated field values.

Every helper strips surrounding whitespace first and raises ``ParseError`` with
the field's constraint message when the text is not acceptable.
"""

from __future__ import annotations

from collections.abc import Iterable

from address_book.core.common.exceptions import ParseError
from address_book.core.domain.person import (
    Address,
    Age,
    Email,
    Income,
    Name,
    Notes,
    Phone,
    Tag,
)


def _require(valid: bool, message: str, value: str) -> None:
    if not valid:
        raise ParseError(message, details={"value": value})


def parse_name(name: str) -> Name:
    trimmed = name.strip()
    _require(Name.is_valid(trimmed), Name.MESSAGE_CONSTRAINTS, name)
    return Name(value=trimmed)


def parse_phone(phone: str) -> Phone:
    trimmed = phone.strip()
    _require(Phone.is_valid(trimmed), Phone.MESSAGE_CONSTRAINTS, phone)
    return Phone(value=trimmed)


def parse_email(email: str) -> Email:
    trimmed = email.strip()
    _require(Email.is_valid(trimmed), Email.MESSAGE_CONSTRAINTS, email)
    return Email(value=trimmed)


def parse_address(address: str) -> Address:
    trimmed = address.strip()
    _require(Address.is_valid(trimmed), Address.MESSAGE_CONSTRAINTS, address)
    return Address(value=trimmed)


def parse_notes(notes: str) -> Notes:
    return Notes(value=notes.strip())


def parse_tag(tag: str) -> Tag:
    trimmed = tag.strip()
    _require(Tag.is_valid(trimmed), Tag.MESSAGE_CONSTRAINTS, tag)
    return Tag(value=trimmed)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_income(income: str) -> Income:
    trimmed = income.strip()
    _require(Income.is_valid(trimmed), Income.MESSAGE_CONSTRAINTS, income)
    return Income(value=float(trimmed))


def parse_age(age: str) -> Age:
    trimmed = age.strip()
    _require(Age.is_valid(trimmed), Age.MESSAGE_CONSTRAINTS, age)
    return Age(value=int(trimmed))
