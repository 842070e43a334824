"""
Command Results Domain Model

This module defines the domain model for command results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CommandResult:
    """
    Result of a command execution.

    The message is what gets shown to the user. ``exit`` asks the interactive
    shell to stop after displaying the message.
    """

    success: bool
    message: str
    name: str = ""
    data: dict[str, Any] | None = None
    exit: bool = False

    def __post_init__(self) -> None:
        """Initialize default values."""
        if self.data is None:
            self.data = {}
