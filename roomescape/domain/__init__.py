from roomescape.domain.models import (
    Member,
    Reservation,
    ReservationTime,
    Theme,
    Waiting,
    WaitingWithRank,
)
from roomescape.domain.value_objects import (
    MemberId,
    ReservationId,
    Schedule,
    ThemeId,
    TimeId,
    WaitingId,
)

__all__ = [
    "Member",
    "Theme",
    "ReservationTime",
    "Reservation",
    "Waiting",
    "WaitingWithRank",
    "MemberId",
    "ThemeId",
    "TimeId",
    "ReservationId",
    "WaitingId",
    "Schedule",
]
