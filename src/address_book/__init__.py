"""Personal address book with a line-oriented command interface."""

__version__ = "0.1.0"
