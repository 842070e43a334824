from __future__ import annotations

from address_book.constants import MESSAGE_INVALID_COMMAND_FORMAT
from address_book.core.commands.argument_tokenizer import tokenize
from address_book.core.commands.cli_syntax import (
    PREFIX_ADD,
    PREFIX_DELETE,
    PREFIX_NOTES,
    PREFIX_VIEW,
)
from address_book.core.commands.parser_utils import parse_name, parse_notes
from address_book.core.commands.registry import command_parser_registry
from address_book.core.common.exceptions import ParseError
from address_book.core.domain.commands.notes_command import NotesCommand, NotesMode

_MODE_PREFIXES = {
    PREFIX_VIEW: NotesMode.VIEW,
    PREFIX_ADD: NotesMode.ADD,
    PREFIX_DELETE: NotesMode.DELETE,
}


class NotesCommandParser:
    """Parses input arguments and creates a new NotesCommand."""

    MESSAGE_BLANK_NOTES = "Notes to add must not be blank. Use d/NAME to delete notes."

    def parse(self, args: str) -> NotesCommand:
        """
        Parse ``v/NAME``, ``a/NAME nt/NOTES`` or ``d/NAME``.

        Raises:
            ParseError: If the arguments do not match exactly one of the forms
        """
        arg_map = tokenize(args, PREFIX_VIEW, PREFIX_ADD, PREFIX_DELETE, PREFIX_NOTES)

        present = [p for p in _MODE_PREFIXES if arg_map.is_present(p)]
        if arg_map.preamble or len(present) != 1:
            raise self._invalid_format()

        arg_map.verify_no_duplicate_prefixes_for(
            PREFIX_VIEW, PREFIX_ADD, PREFIX_DELETE, PREFIX_NOTES
        )

        mode_prefix = present[0]
        mode = _MODE_PREFIXES[mode_prefix]
        name = parse_name(arg_map.get_value(mode_prefix) or "")
        raw_notes = arg_map.get_value(PREFIX_NOTES)

        if mode is not NotesMode.ADD:
            if raw_notes is not None:
                raise self._invalid_format()
            return NotesCommand(name, mode)

        if raw_notes is None:
            raise self._invalid_format()
        notes = parse_notes(raw_notes)
        if notes.is_empty():
            raise ParseError(self.MESSAGE_BLANK_NOTES)
        return NotesCommand(name, mode, notes)

    @staticmethod
    def _invalid_format() -> ParseError:
        return ParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(usage=NotesCommand.MESSAGE_USAGE)
        )


command_parser_registry.register_command(
    NotesCommand.COMMAND_WORD, NotesCommandParser().parse, NotesCommand.MESSAGE_USAGE
)
