"""
Argument prefixes understood by the command parsers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """A marker such as ``n/`` that introduces an argument value."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


# notes
PREFIX_VIEW = Prefix("v/")
PREFIX_ADD = Prefix("a/")
PREFIX_DELETE = Prefix("d/")
PREFIX_NOTES = Prefix("nt/")

# add
PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("addr/")
PREFIX_TAG = Prefix("t/")
PREFIX_INCOME = Prefix("i/")
PREFIX_AGE = Prefix("age/")
