"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from typing import Self


@dataclass(frozen=True)
class _IntId:
    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"{type(self).__name__} must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MemberId(_IntId):
    """Unique identifier for a Member."""


@dataclass(frozen=True)
class ThemeId(_IntId):
    """Unique identifier for a Theme."""


@dataclass(frozen=True)
class TimeId(_IntId):
    """Unique identifier for a ReservationTime."""


@dataclass(frozen=True)
class ReservationId(_IntId):
    """Unique identifier for a Reservation."""


@dataclass(frozen=True)
class WaitingId(_IntId):
    """Unique identifier for a Waiting."""


@dataclass(frozen=True)
class Schedule:
    """One bookable unit: a theme played at a time slot on a date.

    At most one reservation may hold a schedule, and waitings queue on it.
    """

    date: date
    time_id: TimeId
    theme_id: ThemeId
