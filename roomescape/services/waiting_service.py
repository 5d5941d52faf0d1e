"""Waiting service - waitlist rules and promotion.

A waiting queues a member on an already reserved schedule. Queue order is
creation order; approving a waiting turns it into a reservation and removes it.
"""

import logging
from datetime import date

from roomescape.domain import (
    MemberId,
    Reservation,
    Schedule,
    ThemeId,
    TimeId,
    Waiting,
    WaitingId,
    WaitingWithRank,
)
from roomescape.domain.errors import (
    DeletionNotAllowedError,
    DuplicateReservationError,
    DuplicateWaitingError,
    WaitingNotFoundError,
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


class WaitingService:
    """Service for waitlist operations."""

    def __init__(
        self,
        references: ReferenceStore,
        reservations: ReservationStore,
        waitings: WaitingStore,
        unit_of_work: UnitOfWork,
    ) -> None:
        self._references = references
        self._reservations = reservations
        self._waitings = waitings
        self._unit_of_work = unit_of_work

    def create(self, member_id: int, date: date, time_id: int, theme_id: int) -> Waiting:
        """Queue a member for a schedule.

        Raises:
            ReservationTimeNotFoundError, ThemeNotFoundError, MemberNotFoundError:
                If a referenced entity does not exist.
            DuplicateWaitingError: If the member already waits for the schedule.
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
            if self._waitings.exists_by_member_and_schedule(member.id, schedule):
                raise DuplicateWaitingError()
            try:
                waiting = self._waitings.create(member.id, schedule)
            except DuplicateEntryError as exc:
                raise DuplicateWaitingError() from exc

        logger.info("Waiting %s created by member %s for %s", waiting.id, member.id, schedule)
        return waiting

    def approve(self, waiting_id: int) -> Reservation:
        """Promote a waiting to a reservation and remove it from the queue.

        Raises:
            WaitingNotFoundError: If the waiting does not exist.
            DuplicateReservationError: If its schedule is still reserved.
        """
        parsed_id = parse_id(WaitingId, waiting_id, "waiting_id")
        with self._unit_of_work.atomic():
            reservation = self._approve(self._get_waiting(parsed_id))
        logger.info("Waiting %s approved as reservation %s", parsed_id, reservation.id)
        return reservation

    def approve_first(self, theme_id: int, date: date, time_id: int) -> Reservation | None:
        """Approve the oldest waiting for a schedule.

        Returns the new reservation, or None when nobody is waiting.

        Raises:
            ThemeNotFoundError, ReservationTimeNotFoundError:
                If a referenced entity does not exist.
            DuplicateReservationError: If the schedule is still reserved.
        """
        with self._unit_of_work.atomic():
            theme = resolve_theme(self._references, parse_id(ThemeId, theme_id, "theme_id"))
            reservation_time = resolve_time(
                self._references, parse_id(TimeId, time_id, "time_id")
            )

            schedule = Schedule(date=date, time_id=reservation_time.id, theme_id=theme.id)
            waitings = self._waitings.list_for_schedule(schedule)
            if not waitings:
                logger.info("No waiting to approve for %s", schedule)
                return None
            reservation = self._approve(waitings[0])

        logger.info("Waiting %s approved as reservation %s", waitings[0].id, reservation.id)
        return reservation

    def delete_by_member_and_id(self, member_id: int, waiting_id: int) -> None:
        """Cancel a member's own waiting.

        Raises:
            WaitingNotFoundError: If the waiting does not exist.
            DeletionNotAllowedError: If the waiting belongs to another member.
        """
        parsed_member_id = parse_id(MemberId, member_id, "member_id")
        parsed_id = parse_id(WaitingId, waiting_id, "waiting_id")
        with self._unit_of_work.atomic():
            waiting = self._get_waiting(parsed_id)
            if not waiting.belongs_to(parsed_member_id):
                raise DeletionNotAllowedError()
            self._waitings.delete(parsed_id)
        logger.info("Waiting %s cancelled by member %s", parsed_id, parsed_member_id)

    def delete_by_id(self, waiting_id: int) -> None:
        """Delete any waiting (administrative path).

        Raises:
            WaitingNotFoundError: If the waiting does not exist.
        """
        parsed_id = parse_id(WaitingId, waiting_id, "waiting_id")
        with self._unit_of_work.atomic():
            if not self._waitings.exists(parsed_id):
                raise WaitingNotFoundError(parsed_id)
            self._waitings.delete(parsed_id)
        logger.info("Waiting %s deleted", parsed_id)

    def find_all(self) -> list[Waiting]:
        return self._waitings.list_all()

    def find_ranks_by_member(self, member_id: int) -> list[WaitingWithRank]:
        """Return the member's waitings with their queue position; 0 is next in line."""
        return self._waitings.list_ranked_by_member(parse_id(MemberId, member_id, "member_id"))

    def _get_waiting(self, waiting_id: WaitingId) -> Waiting:
        waiting = self._waitings.get(waiting_id)
        if waiting is None:
            raise WaitingNotFoundError(waiting_id)
        return waiting

    def _approve(self, waiting: Waiting) -> Reservation:
        if self._reservations.exists_by_schedule(waiting.schedule):
            raise DuplicateReservationError()
        return promote(self._reservations, self._waitings, waiting)
