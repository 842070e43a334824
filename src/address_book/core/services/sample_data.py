"""
Initial address book contents: bundled sample contacts or a YAML seed file.

A seed file holds a list of mappings with the keys ``name``, ``phone``,
``email``, ``address``, ``income`` and ``age``, and optionally ``notes`` and
``tags``. Values go through the same validation as the ``add`` command.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from address_book.core.commands.parser_utils import (
    parse_address,
    parse_age,
    parse_email,
    parse_income,
    parse_name,
    parse_notes,
    parse_phone,
    parse_tags,
)
from address_book.core.common.exceptions import (
    AddressBookError,
    ConfigurationError,
)
from address_book.core.domain.address_book import AddressBook
from address_book.core.domain.person import Person

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("name", "phone", "email", "address", "income", "age")

SAMPLE_PERSONS: tuple[dict[str, Any], ...] = (
    {
        "name": "Alex Yeoh",
        "phone": "87438807",
        "email": "alexyeoh@example.com",
        "address": "Blk 30 Geylang Street 29, #06-40",
        "income": "4200",
        "age": "31",
        "tags": ["friends"],
    },
    {
        "name": "Bernice Yu",
        "phone": "99272758",
        "email": "berniceyu@example.com",
        "address": "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
        "income": "6100.50",
        "age": "28",
        "notes": "Prefers email contact",
        "tags": ["colleagues", "friends"],
    },
    {
        "name": "Charlotte Oliveiro",
        "phone": "93210283",
        "email": "charlotte@example.com",
        "address": "Blk 11 Ang Mo Kio Street 74, #11-04",
        "income": "3800",
        "age": "45",
        "tags": ["neighbours"],
    },
    {
        "name": "David Li",
        "phone": "91031282",
        "email": "lidavid@example.com",
        "address": "Blk 436 Serangoon Gardens Street 26, #16-43",
        "income": "5200",
        "age": "39",
        "tags": ["family"],
    },
)


def person_from_mapping(data: Mapping[str, Any]) -> Person:
    """Build a person from raw seed values.

    Raises:
        ParseError: If a value fails validation
        ConfigurationError: If a required key is missing
    """
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigurationError(
            f"Seed entry is missing required field(s): {', '.join(missing)}",
            details={"missing": missing},
        )

    notes = data.get("notes")
    return Person(
        name=parse_name(str(data["name"])),
        phone=parse_phone(str(data["phone"])),
        email=parse_email(str(data["email"])),
        address=parse_address(str(data["address"])),
        notes=parse_notes(str(notes)) if notes is not None else parse_notes(""),
        tags=parse_tags(str(tag) for tag in data.get("tags") or ()),
        income=parse_income(str(data["income"])),
        age=parse_age(str(data["age"])),
    )


def get_sample_address_book() -> AddressBook:
    return AddressBook(person_from_mapping(entry) for entry in SAMPLE_PERSONS)


def load_seed_file(path: str | Path) -> AddressBook:
    """
    Load an address book from a YAML seed file.

    Raises:
        ConfigurationError: If the file is missing, malformed, or holds an
            invalid or duplicate person
    """
    seed_path = Path(path)
    if not seed_path.exists():
        raise ConfigurationError(
            f"Seed file not found: {seed_path}", details={"path": str(seed_path)}
        )

    try:
        with open(seed_path, encoding="utf-8") as f:
            entries = yaml.safe_load(f) or []
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in seed file {seed_path}: {exc}",
            details={"path": str(seed_path)},
        ) from exc

    if not isinstance(entries, list):
        raise ConfigurationError(
            f"Seed file {seed_path} must contain a list of persons",
            details={"path": str(seed_path)},
        )

    address_book = AddressBook()
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ConfigurationError(
                f"Seed entry #{index + 1} must be a mapping",
                details={"path": str(seed_path), "index": index},
            )
        try:
            address_book.add_person(person_from_mapping(entry))
        except ConfigurationError:
            raise
        except AddressBookError as exc:
            raise ConfigurationError(
                f"Seed entry #{index + 1} is invalid: {exc.message}",
                details={"path": str(seed_path), "index": index},
            ) from exc

    logger.info("Loaded %d persons from %s", len(address_book), seed_path)
    return address_book
