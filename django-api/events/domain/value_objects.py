"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class EventStatus(str, Enum):
    """Lifecycle status of an event."""

    ACTIVE = "ACTIVE"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a status name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the value names no known status.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown event status: {value!r}") from None


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0
