"""Reservation service - booking rules for confirmed reservations.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import date, datetime, timedelta

from roomescape.domain import (
    MemberId,
    Reservation,
    ReservationId,
    ReservationTime,
    Schedule,
    ThemeId,
    TimeId,
)
from roomescape.domain.errors import (
    DuplicateReservationError,
    PastReservationError,
    ReservationNotFoundError,
    ReservationTooSoonError,
)
from roomescape.services.lookups import (
    parse_id,
    promote,
    resolve_member,
    resolve_theme,
    resolve_time,
)
from roomescape.stores.interfaces import (
    DuplicateEntryError,
    ReferenceStore,
    ReservationStore,
    UnitOfWork,
    WaitingStore,
)

logger = logging.getLogger(__name__)

DEFAULT_BOOKING_CUTOFF = timedelta(minutes=10)


class ReservationService:
    """Service for creating, cancelling and querying reservations."""

    def __init__(
        self,
        references: ReferenceStore,
        reservations: ReservationStore,
        waitings: WaitingStore,
        unit_of_work: UnitOfWork,
        booking_cutoff: timedelta = DEFAULT_BOOKING_CUTOFF,
    ) -> None:
        self._references = references
        self._reservations = reservations
        self._waitings = waitings
        self._unit_of_work = unit_of_work
        self._booking_cutoff = booking_cutoff

    def create(
        self,
        member_id: int,
        date: date,
        time_id: int,
        theme_id: int,
        now: datetime,
    ) -> Reservation:
        """Book a schedule for a member.

        ``now`` is the reference instant for the booking window. When it is
        timezone-aware the slot start is interpreted in the same zone.

        Raises:
            ReservationTimeNotFoundError, ThemeNotFoundError, MemberNotFoundError:
                If a referenced entity does not exist.
            DuplicateReservationError: If the schedule is already reserved.
            PastReservationError: If the slot starts before ``now``.
            ReservationTooSoonError: If the slot starts within the booking cutoff.
        """
        with self._unit_of_work.atomic():
            reservation_time = resolve_time(
                self._references, parse_id(TimeId, time_id, "time_id")
            )
            theme = resolve_theme(self._references, parse_id(ThemeId, theme_id, "theme_id"))
            member = resolve_member(
                self._references, parse_id(MemberId, member_id, "member_id")
            )

            schedule = Schedule(date=date, time_id=reservation_time.id, theme_id=theme.id)
            if self._reservations.exists_by_schedule(schedule):
                raise DuplicateReservationError()
            self._validate_booking_window(date, reservation_time, now)

            try:
                reservation = self._reservations.create(member.id, schedule)
            except DuplicateEntryError as exc:
                raise DuplicateReservationError() from exc

        logger.info(
            "Reservation %s created by member %s for %s",
            reservation.id,
            member.id,
            schedule,
        )
        return reservation

    def delete_and_promote(self, reservation_id: int) -> Reservation | None:
        """Cancel a reservation and hand its schedule to the first waiting member.

        Returns the promoted reservation, or None when nobody was waiting and
        the schedule is now free.

        Raises:
            ReservationNotFoundError: If the reservation does not exist.
        """
        parsed_id = parse_id(ReservationId, reservation_id, "reservation_id")
        with self._unit_of_work.atomic():
            reservation = self._get_reservation(parsed_id)
            self._reservations.delete(reservation.id)

            waiting = self._waitings.first_for_schedule(reservation.schedule)
            promoted = None
            if waiting is not None:
                promoted = promote(self._reservations, self._waitings, waiting)

        logger.info("Reservation %s cancelled", reservation.id)
        if promoted is None:
            logger.info("No waiting for %s, schedule is free", reservation.schedule)
        else:
            logger.info(
                "Waiting %s promoted to reservation %s for member %s",
                waiting.id,
                promoted.id,
                promoted.member.id,
            )
        return promoted

    def find_all(self) -> list[Reservation]:
        """Return all reservations."""
        return self._reservations.list_all()

    def find_by_id(self, reservation_id: int) -> Reservation:
        """Return a reservation by ID.

        Raises:
            InvalidIdError: If the reservation_id is not a positive integer.
            ReservationNotFoundError: If the reservation does not exist.
        """
        return self._get_reservation(
            parse_id(ReservationId, reservation_id, "reservation_id")
        )

    def find_by_conditions(
        self,
        member_id: int | None = None,
        theme_id: int | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Reservation]:
        """Return reservations matching the given filters; date bounds are inclusive."""
        return self._reservations.list_by_conditions(
            member_id=parse_id(MemberId, member_id, "member_id") if member_id is not None else None,
            theme_id=parse_id(ThemeId, theme_id, "theme_id") if theme_id is not None else None,
            date_from=date_from,
            date_to=date_to,
        )

    def find_by_member(self, member_id: int) -> list[Reservation]:
        """Return a member's reservations."""
        return self._reservations.list_by_member(parse_id(MemberId, member_id, "member_id"))

    def _get_reservation(self, reservation_id: ReservationId) -> Reservation:
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def _validate_booking_window(
        self, date: date, reservation_time: ReservationTime, now: datetime
    ) -> None:
        starts_at = datetime.combine(date, reservation_time.start_at, tzinfo=now.tzinfo)
        if starts_at < now:
            raise PastReservationError()
        if starts_at - now < self._booking_cutoff:
            raise ReservationTooSoonError(int(self._booking_cutoff.total_seconds() // 60))
