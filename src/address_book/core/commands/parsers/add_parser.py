from __future__ import annotations

from address_book.constants import MESSAGE_INVALID_COMMAND_FORMAT
from address_book.core.commands.argument_tokenizer import tokenize
from address_book.core.commands.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_AGE,
    PREFIX_EMAIL,
    PREFIX_INCOME,
    PREFIX_NAME,
    PREFIX_NOTES,
    PREFIX_PHONE,
    PREFIX_TAG,
)
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
from address_book.core.commands.registry import command_parser_registry
from address_book.core.common.exceptions import ParseError
from address_book.core.domain.commands.add_command import AddCommand
from address_book.core.domain.person import Notes, Person

_REQUIRED = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_INCOME,
    PREFIX_AGE,
)


class AddCommandParser:
    """Parses input arguments and creates a new AddCommand."""

    def parse(self, args: str) -> AddCommand:
        arg_map = tokenize(args, *_REQUIRED, PREFIX_NOTES, PREFIX_TAG)

        if arg_map.preamble or not all(arg_map.is_present(p) for p in _REQUIRED):
            raise ParseError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(usage=AddCommand.MESSAGE_USAGE)
            )

        arg_map.verify_no_duplicate_prefixes_for(*_REQUIRED, PREFIX_NOTES)

        raw_notes = arg_map.get_value(PREFIX_NOTES)
        person = Person(
            name=parse_name(arg_map.get_value(PREFIX_NAME) or ""),
            phone=parse_phone(arg_map.get_value(PREFIX_PHONE) or ""),
            email=parse_email(arg_map.get_value(PREFIX_EMAIL) or ""),
            address=parse_address(arg_map.get_value(PREFIX_ADDRESS) or ""),
            notes=parse_notes(raw_notes) if raw_notes is not None else Notes.empty(),
            tags=parse_tags(arg_map.get_all_values(PREFIX_TAG)),
            income=parse_income(arg_map.get_value(PREFIX_INCOME) or ""),
            age=parse_age(arg_map.get_value(PREFIX_AGE) or ""),
        )
        return AddCommand(person)


command_parser_registry.register_command(
    AddCommand.COMMAND_WORD, AddCommandParser().parse, AddCommand.MESSAGE_USAGE
)
