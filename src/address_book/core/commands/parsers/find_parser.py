from __future__ import annotations

from address_book.constants import MESSAGE_INVALID_COMMAND_FORMAT
from address_book.core.commands.registry import command_parser_registry
from address_book.core.common.exceptions import ParseError
from address_book.core.domain.commands.find_command import FindCommand
from address_book.core.domain.predicates import NameContainsKeywordsPredicate


class FindCommandParser:
    """Parses input arguments and creates a new FindCommand."""

    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise ParseError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(usage=FindCommand.MESSAGE_USAGE)
            )
        return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


command_parser_registry.register_command(
    FindCommand.COMMAND_WORD, FindCommandParser().parse, FindCommand.MESSAGE_USAGE
)
