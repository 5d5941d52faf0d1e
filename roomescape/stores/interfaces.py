"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date

from roomescape.domain import (
    Member,
    MemberId,
    Reservation,
    ReservationId,
    ReservationTime,
    Schedule,
    Theme,
    ThemeId,
    TimeId,
    Waiting,
    WaitingId,
    WaitingWithRank,
)


class DuplicateEntryError(Exception):
    """Raised by a store when a uniqueness constraint rejects an insert."""


class UnitOfWork(ABC):
    """Groups store writes so they commit or roll back together."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a context manager; any exception inside rolls back every write."""
        ...


class ReferenceStore(ABC):
    """Interface for resolving members, themes and reservation times."""

    @abstractmethod
    def get_member(self, member_id: MemberId) -> Member | None:
        """Return a member by ID, or None if not found."""
        ...

    @abstractmethod
    def get_theme(self, theme_id: ThemeId) -> Theme | None:
        """Return a theme by ID, or None if not found."""
        ...

    @abstractmethod
    def get_time(self, time_id: TimeId) -> ReservationTime | None:
        """Return a reservation time by ID, or None if not found."""
        ...

    @abstractmethod
    def list_themes(self) -> list[Theme]:
        """Return all themes ordered by name."""
        ...

    @abstractmethod
    def list_times(self) -> list[ReservationTime]:
        """Return all reservation times ordered by start_at ascending."""
        ...


class ReservationStore(ABC):
    """Interface for confirmed reservation persistence."""

    @abstractmethod
    def exists_by_schedule(self, schedule: Schedule) -> bool:
        """Check if a reservation holds the schedule."""
        ...

    @abstractmethod
    def get(self, reservation_id: ReservationId) -> Reservation | None:
        """Return a reservation by ID, or None if not found."""
        ...

    @abstractmethod
    def list_all(self) -> list[Reservation]:
        """Return all reservations ordered by date, then start time."""
        ...

    @abstractmethod
    def list_by_conditions(
        self,
        member_id: MemberId | None = None,
        theme_id: ThemeId | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Reservation]:
        """Return reservations matching every given filter.

        Date bounds are inclusive; a None argument does not filter.
        """
        ...

    @abstractmethod
    def list_by_member(self, member_id: MemberId) -> list[Reservation]:
        """Return a member's reservations ordered by date, then start time."""
        ...

    @abstractmethod
    def create(self, member_id: MemberId, schedule: Schedule) -> Reservation:
        """Persist a new reservation.

        Raises:
            DuplicateEntryError: If the schedule is already reserved.
        """
        ...

    @abstractmethod
    def delete(self, reservation_id: ReservationId) -> None:
        """Delete a reservation by ID."""
        ...


class WaitingStore(ABC):
    """Interface for waitlist persistence."""

    @abstractmethod
    def exists(self, waiting_id: WaitingId) -> bool:
        """Check if a waiting exists."""
        ...

    @abstractmethod
    def exists_by_member_and_schedule(
        self, member_id: MemberId, schedule: Schedule
    ) -> bool:
        """Check if the member already waits for the schedule."""
        ...

    @abstractmethod
    def get(self, waiting_id: WaitingId) -> Waiting | None:
        """Return a waiting by ID, or None if not found."""
        ...

    @abstractmethod
    def list_all(self) -> list[Waiting]:
        """Return all waitings ordered by created_at ascending."""
        ...

    @abstractmethod
    def first_for_schedule(self, schedule: Schedule) -> Waiting | None:
        """Return the oldest waiting for the schedule, or None if nobody waits."""
        ...

    @abstractmethod
    def list_for_schedule(self, schedule: Schedule) -> list[Waiting]:
        """Return waitings for the schedule, oldest first."""
        ...

    @abstractmethod
    def list_ranked_by_member(self, member_id: MemberId) -> list[WaitingWithRank]:
        """Return the member's waitings with their zero-based queue position.

        Ordered by created_at ascending.
        """
        ...

    @abstractmethod
    def create(self, member_id: MemberId, schedule: Schedule) -> Waiting:
        """Persist a new waiting.

        Raises:
            DuplicateEntryError: If the member already waits for the schedule.
        """
        ...

    @abstractmethod
    def delete(self, waiting_id: WaitingId) -> None:
        """Delete a waiting by ID."""
        ...
