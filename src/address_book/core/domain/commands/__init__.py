"""Domain commands executed against the address book model."""

from address_book.core.domain.command_results import CommandResult
from address_book.core.domain.commands.add_command import AddCommand
from address_book.core.domain.commands.base_command import BaseCommand
from address_book.core.domain.commands.exit_command import ExitCommand
from address_book.core.domain.commands.find_command import FindCommand
from address_book.core.domain.commands.help_command import HelpCommand
from address_book.core.domain.commands.list_command import ListCommand
from address_book.core.domain.commands.notes_command import NotesCommand, NotesMode

__all__ = [
    "AddCommand",
    "BaseCommand",
    "CommandResult",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "NotesCommand",
    "NotesMode",
]
