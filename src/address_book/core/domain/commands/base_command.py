"""
Base command implementation.

This module provides the base class for all address book commands.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from address_book.core.domain.command_results import CommandResult
from address_book.core.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """
    Base class for all commands.

    A command is created by its parser with fully validated arguments and is
    then executed once against the model.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command word."""

    @property
    @abstractmethod
    def format(self) -> str:
        """Command usage text."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Command description."""

    @property
    def examples(self) -> list[str]:
        """Command examples (optional)."""
        return []

    @abstractmethod
    async def execute(self, model: IModel) -> CommandResult:
        """
        Execute the command.

        Args:
            model: The model to operate on

        Returns:
            The command result

        Raises:
            CommandError: If the command cannot be carried out
        """

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{key.lstrip('_')}={value!r}" for key, value in vars(self).items()
        )
        return f"{self.__class__.__name__}({fields})"
