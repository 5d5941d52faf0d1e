"""Helpers shared by the services for parsing IDs and resolving references."""

from typing import TypeVar

from roomescape.domain import (
    Member,
    MemberId,
    Reservation,
    ReservationTime,
    Theme,
    ThemeId,
    TimeId,
    Waiting,
)
from roomescape.domain.errors import (
    DuplicateReservationError,
    InvalidIdError,
    MemberNotFoundError,
    ReservationTimeNotFoundError,
    ThemeNotFoundError,
)
from roomescape.stores.interfaces import (
    DuplicateEntryError,
    ReferenceStore,
    ReservationStore,
    WaitingStore,
)

IdT = TypeVar("IdT")


def parse_id(id_type: type[IdT], value: int | str, field: str) -> IdT:
    """Wrap a raw identifier in its value object.

    Raises:
        InvalidIdError: If the value is not a positive integer.
    """
    try:
        return id_type(int(value))
    except (TypeError, ValueError) as exc:
        raise InvalidIdError(field) from exc


def resolve_member(references: ReferenceStore, member_id: MemberId) -> Member:
    member = references.get_member(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


def resolve_theme(references: ReferenceStore, theme_id: ThemeId) -> Theme:
    theme = references.get_theme(theme_id)
    if theme is None:
        raise ThemeNotFoundError(theme_id)
    return theme


def resolve_time(references: ReferenceStore, time_id: TimeId) -> ReservationTime:
    reservation_time = references.get_time(time_id)
    if reservation_time is None:
        raise ReservationTimeNotFoundError(time_id)
    return reservation_time


def promote(
    reservations: ReservationStore, waitings: WaitingStore, waiting: Waiting
) -> Reservation:
    """Turn a waiting into a reservation for the same schedule and consume it.

    Must run inside the caller's unit of work.

    Raises:
        DuplicateReservationError: If the schedule is reserved in the meantime.
    """
    try:
        reservation = reservations.create(waiting.member.id, waiting.schedule)
    except DuplicateEntryError as exc:
        raise DuplicateReservationError() from exc
    waitings.delete(waiting.id)
    return reservation
