"""
Common exception classes for the address book.

This module defines custom exception classes used throughout the application
for better error handling and categorization.
"""

from __future__ import annotations


class AddressBookError(Exception):
    """Base exception class for all address book errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class CommandError(AddressBookError):
    """Raised when a parsed command cannot be carried out against the model."""

    def __init__(
        self, message: str = "Command failed", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


class ParseError(AddressBookError):
    """Raised when user input does not match the expected command format."""

    def __init__(
        self, message: str = "Invalid command", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


class PersonNotFoundError(AddressBookError):
    """Raised when an operation targets a person that is not in the address book."""

    def __init__(
        self,
        message: str = "Person not found in the address book",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class DuplicatePersonError(AddressBookError):
    """Raised when an operation would store the same person twice."""

    def __init__(
        self,
        message: str = "Operation would result in duplicate persons",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ConfigurationError(AddressBookError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
