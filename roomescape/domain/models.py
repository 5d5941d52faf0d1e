"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in roomescape/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from roomescape.domain.value_objects import (
    MemberId,
    ReservationId,
    Schedule,
    ThemeId,
    TimeId,
    WaitingId,
)


@dataclass(frozen=True)
class Member:
    """Domain representation of a Member."""

    id: MemberId
    name: str
    email: str


@dataclass(frozen=True)
class Theme:
    """Domain representation of a Theme."""

    id: ThemeId
    name: str
    description: str
    thumbnail: str | None


@dataclass(frozen=True)
class ReservationTime:
    """Domain representation of a bookable start time."""

    id: TimeId
    start_at: time


@dataclass(frozen=True)
class Reservation:
    """Domain representation of a confirmed Reservation."""

    id: ReservationId
    member: Member
    date: date
    time: ReservationTime
    theme: Theme
    created_at: datetime

    @property
    def schedule(self) -> Schedule:
        return Schedule(date=self.date, time_id=self.time.id, theme_id=self.theme.id)


@dataclass(frozen=True)
class Waiting:
    """Domain representation of a queued request for a reserved schedule."""

    id: WaitingId
    member: Member
    date: date
    time: ReservationTime
    theme: Theme
    created_at: datetime

    @property
    def schedule(self) -> Schedule:
        return Schedule(date=self.date, time_id=self.time.id, theme_id=self.theme.id)

    def belongs_to(self, member_id: MemberId) -> bool:
        return self.member.id == member_id


@dataclass(frozen=True)
class WaitingWithRank:
    """A Waiting with its zero-based position in its schedule's queue."""

    waiting: Waiting
    rank: int
