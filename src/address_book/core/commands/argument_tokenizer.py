"""
Splits a command's argument string into prefixed values.

A prefix only starts a new value when it appears at the beginning of the
argument string or right after whitespace, so ``john/doe`` inside a value is
left alone while `` n/John`` starts a name.
"""

from __future__ import annotations

from collections import defaultdict

from address_book.constants import MESSAGE_DUPLICATE_FIELDS
from address_book.core.commands.cli_syntax import Prefix
from address_book.core.common.exceptions import ParseError


class ArgumentMultimap:
    """Values collected per prefix, plus the text before the first prefix."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, ()))

    def is_present(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise if any of ``prefixes`` was given more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, ())) > 1]
        if duplicated:
            raise ParseError(
                MESSAGE_DUPLICATE_FIELDS.format(
                    prefixes=" ".join(str(p) for p in duplicated)
                ),
                details={"prefixes": [str(p) for p in duplicated]},
            )


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenize an argument string.

    Args:
        args_string: Arguments following the command word, e.g. `` v/John Doe``
        prefixes: Prefixes recognised by the calling parser

    Returns:
        The values found for each prefix. Values are stripped of surrounding
        whitespace.
    """
    positions = _find_all_prefix_positions(args_string, prefixes)
    return _extract_arguments(args_string, positions)


def _find_all_prefix_positions(
    args_string: str, prefixes: tuple[Prefix, ...]
) -> list[tuple[int, Prefix]]:
    positions: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        positions.extend((index, prefix) for index in _find_prefix(args_string, prefix))
    positions.sort(key=lambda item: item[0])
    return positions


def _find_prefix(args_string: str, prefix: Prefix) -> list[int]:
    marker = prefix.prefix
    found: list[int] = []
    index = args_string.find(marker)
    while index != -1:
        if index == 0 or args_string[index - 1].isspace():
            found.append(index)
        index = args_string.find(marker, index + 1)
    return found


def _extract_arguments(
    args_string: str, positions: list[tuple[int, Prefix]]
) -> ArgumentMultimap:
    preamble_end = positions[0][0] if positions else len(args_string)
    multimap = ArgumentMultimap(args_string[:preamble_end].strip())

    for i, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix.prefix)
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
        multimap.put(prefix, args_string[value_start:value_end].strip())

    return multimap
