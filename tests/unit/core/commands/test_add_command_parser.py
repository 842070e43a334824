import pytest
from address_book.core.commands.parsers.add_parser import AddCommandParser
from address_book.core.common.exceptions import ParseError
from address_book.core.domain.commands.add_command import AddCommand
from address_book.core.domain.person import Email, Phone

from tests.fixtures.persons import make_person

_VALID = (
    " n/Amy Bee p/85355255 e/amy@gmail.com addr/123, Jurong West Ave 6, #08-111"
    " i/4000 age/30"
)


@pytest.fixture
def parser() -> AddCommandParser:
    return AddCommandParser()


def test_parse_required_fields(parser: AddCommandParser):
    assert parser.parse(_VALID) == AddCommand(make_person())


def test_parse_with_notes_and_tags(parser: AddCommandParser):
    command = parser.parse(_VALID + " nt/Likes cats t/friends t/gym")

    assert command == AddCommand(
        make_person(notes="Likes cats", tags=("friends", "gym"))
    )


@pytest.mark.parametrize("missing", ["n/", "p/", "e/", "addr/", "i/", "age/"])
def test_missing_required_field(parser: AddCommandParser, missing: str):
    args = " ".join(
        part for part in _VALID.split(" ") if part and not part.startswith(missing)
    )

    with pytest.raises(ParseError, match="Invalid command format!"):
        parser.parse(" " + args)


def test_invalid_phone(parser: AddCommandParser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse(_VALID.replace("p/85355255", "p/12a"))

    assert exc_info.value.message == Phone.MESSAGE_CONSTRAINTS


def test_invalid_email(parser: AddCommandParser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse(_VALID.replace("e/amy@gmail.com", "e/amy@x"))

    assert exc_info.value.message == Email.MESSAGE_CONSTRAINTS


def test_duplicate_single_valued_field(parser: AddCommandParser):
    with pytest.raises(ParseError, match="Multiple values"):
        parser.parse(_VALID + " p/12345")
