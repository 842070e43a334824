import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
import yaml
from address_book.core.common.logging_utils import EnvironmentTaggingFormatter
from address_book.core.domain.address_book import AddressBook
from address_book.core.domain.person import Person
from address_book.core.services.model_manager import ModelManager

from tests.fixtures.persons import make_person


@pytest.fixture
def alice() -> Person:
    return make_person(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
        notes="Likes tea",
        tags=("friends",),
        income=5200.0,
        age=29,
    )


@pytest.fixture
def benson() -> Person:
    return make_person(
        name="Benson Meier",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        tags=("owesMoney", "friends"),
        income=3100.0,
        age=41,
    )


@pytest.fixture
def carl() -> Person:
    return make_person(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
        income=7000.0,
        age=52,
    )


@pytest.fixture
def address_book(alice: Person, benson: Person, carl: Person) -> AddressBook:
    return AddressBook([alice, benson, carl])


@pytest.fixture
def model(address_book: AddressBook) -> ModelManager:
    return ModelManager(address_book)


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Write a small valid seed file and return its path."""
    entries = [
        {
            "name": "Daniel Meier",
            "phone": "87652533",
            "email": "cornelia@example.com",
            "address": "10th street",
            "income": 2500,
            "age": 23,
            "tags": ["friends"],
        },
        {
            "name": "Elle Meyer",
            "phone": "9482224",
            "email": "werner@example.com",
            "address": "michegan ave",
            "income": "6100.50",
            "age": "34",
            "notes": "Met at the conference",
        },
    ]
    path = tmp_path / "people.yaml"
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(entries, f, sort_keys=False)
    return path


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` side effects on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, EnvironmentTaggingFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()
