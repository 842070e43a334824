from __future__ import annotations

from abc import ABC
from typing import Any

from pydantic import ConfigDict

from address_book.core.interfaces.model_bases import DomainModel


class ValueObject(DomainModel, ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True  # Value objects are immutable
    )


class SingleValueObject(ValueObject, ABC):
    """Value object wrapping exactly one validated value."""

    value: Any

    def __str__(self) -> str:
        return str(self.value)
