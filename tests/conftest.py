"""Pytest configuration and shared fixtures.

Service tests run against in-memory stores that honour the same contracts as
the Django stores, including uniqueness and transactional rollback.
"""

import itertools
from datetime import date, datetime, time, timedelta

import pytest
from rest_framework.test import APIClient

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
from roomescape.services import ReservationService, WaitingService
from roomescape.stores import (
    DuplicateEntryError,
    ReferenceStore,
    ReservationStore,
    UnitOfWork,
    WaitingStore,
)


class FakeDatabase:
    """Tables shared by the in-memory stores."""

    def __init__(self) -> None:
        self.members: dict[MemberId, Member] = {}
        self.themes: dict[ThemeId, Theme] = {}
        self.times: dict[TimeId, ReservationTime] = {}
        self.reservations: dict[ReservationId, Reservation] = {}
        self.waitings: dict[WaitingId, Waiting] = {}
        self._ids = itertools.count(1)
        self._ticks = itertools.count()

    def next_id(self) -> int:
        return next(self._ids)

    def next_created_at(self) -> datetime:
        return datetime(2025, 1, 1) + timedelta(seconds=next(self._ticks))

    def add_member(self, name: str) -> Member:
        member = Member(id=MemberId(self.next_id()), name=name, email=f"{name}@example.com")
        self.members[member.id] = member
        return member

    def add_theme(self, name: str) -> Theme:
        theme = Theme(id=ThemeId(self.next_id()), name=name, description="", thumbnail=None)
        self.themes[theme.id] = theme
        return theme

    def add_time(self, start_at: time) -> ReservationTime:
        reservation_time = ReservationTime(id=TimeId(self.next_id()), start_at=start_at)
        self.times[reservation_time.id] = reservation_time
        return reservation_time

    def resolve(self, member_id: MemberId, schedule: Schedule) -> dict:
        return {
            "member": self.members[member_id],
            "date": schedule.date,
            "time": self.times[schedule.time_id],
            "theme": self.themes[schedule.theme_id],
            "created_at": self.next_created_at(),
        }


class FakeUnitOfWork(UnitOfWork):
    def __init__(self, database: FakeDatabase) -> None:
        self._database = database
        self._snapshots: list[tuple[dict, dict]] = []

    def atomic(self):
        return self

    def __enter__(self) -> None:
        self._snapshots.append(
            (dict(self._database.reservations), dict(self._database.waitings))
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        reservations, waitings = self._snapshots.pop()
        if exc_type is not None:
            self._database.reservations = reservations
            self._database.waitings = waitings
        return False


class FakeReferenceStore(ReferenceStore):
    def __init__(self, database: FakeDatabase) -> None:
        self._database = database

    def get_member(self, member_id: MemberId) -> Member | None:
        return self._database.members.get(member_id)

    def get_theme(self, theme_id: ThemeId) -> Theme | None:
        return self._database.themes.get(theme_id)

    def get_time(self, time_id: TimeId) -> ReservationTime | None:
        return self._database.times.get(time_id)

    def list_themes(self) -> list[Theme]:
        return sorted(self._database.themes.values(), key=lambda theme: theme.name)

    def list_times(self) -> list[ReservationTime]:
        return sorted(self._database.times.values(), key=lambda t: t.start_at)


class FakeReservationStore(ReservationStore):
    def __init__(self, database: FakeDatabase) -> None:
        self._database = database

    def _sorted(self, reservations) -> list[Reservation]:
        return sorted(reservations, key=lambda r: (r.date, r.time.start_at, r.id.value))

    def exists_by_schedule(self, schedule: Schedule) -> bool:
        return any(r.schedule == schedule for r in self._database.reservations.values())

    def get(self, reservation_id: ReservationId) -> Reservation | None:
        return self._database.reservations.get(reservation_id)

    def list_all(self) -> list[Reservation]:
        return self._sorted(self._database.reservations.values())

    def list_by_conditions(self, member_id=None, theme_id=None, date_from=None, date_to=None):
        return self._sorted(
            r
            for r in self._database.reservations.values()
            if (member_id is None or r.member.id == member_id)
            and (theme_id is None or r.theme.id == theme_id)
            and (date_from is None or r.date >= date_from)
            and (date_to is None or r.date <= date_to)
        )

    def list_by_member(self, member_id: MemberId) -> list[Reservation]:
        return self.list_by_conditions(member_id=member_id)

    def create(self, member_id: MemberId, schedule: Schedule) -> Reservation:
        if any(r.schedule == schedule for r in self._database.reservations.values()):
            raise DuplicateEntryError(str(schedule))
        reservation = Reservation(
            id=ReservationId(self._database.next_id()),
            **self._database.resolve(member_id, schedule),
        )
        self._database.reservations[reservation.id] = reservation
        return reservation

    def delete(self, reservation_id: ReservationId) -> None:
        self._database.reservations.pop(reservation_id, None)


class FakeWaitingStore(WaitingStore):
    def __init__(self, database: FakeDatabase) -> None:
        self._database = database

    def _ordered(self) -> list[Waiting]:
        return sorted(self._database.waitings.values(), key=lambda w: (w.created_at, w.id.value))

    def exists(self, waiting_id: WaitingId) -> bool:
        return waiting_id in self._database.waitings

    def exists_by_member_and_schedule(self, member_id: MemberId, schedule: Schedule) -> bool:
        return any(
            w.member.id == member_id and w.schedule == schedule
            for w in self._database.waitings.values()
        )

    def get(self, waiting_id: WaitingId) -> Waiting | None:
        return self._database.waitings.get(waiting_id)

    def list_all(self) -> list[Waiting]:
        return self._ordered()

    def first_for_schedule(self, schedule: Schedule) -> Waiting | None:
        return next(iter(self.list_for_schedule(schedule)), None)

    def list_for_schedule(self, schedule: Schedule) -> list[Waiting]:
        return [w for w in self._ordered() if w.schedule == schedule]

    def list_ranked_by_member(self, member_id: MemberId) -> list[WaitingWithRank]:
        return [
            WaitingWithRank(waiting=w, rank=self.list_for_schedule(w.schedule).index(w))
            for w in self._ordered()
            if w.member.id == member_id
        ]

    def create(self, member_id: MemberId, schedule: Schedule) -> Waiting:
        if any(
            w.member.id == member_id and w.schedule == schedule
            for w in self._database.waitings.values()
        ):
            raise DuplicateEntryError(str(schedule))
        waiting = Waiting(
            id=WaitingId(self._database.next_id()),
            **self._database.resolve(member_id, schedule),
        )
        self._database.waitings[waiting.id] = waiting
        return waiting

    def delete(self, waiting_id: WaitingId) -> None:
        self._database.waitings.pop(waiting_id, None)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def stores(fake_db: FakeDatabase) -> dict:
    return {
        "references": FakeReferenceStore(fake_db),
        "reservations": FakeReservationStore(fake_db),
        "waitings": FakeWaitingStore(fake_db),
        "unit_of_work": FakeUnitOfWork(fake_db),
    }


@pytest.fixture
def reservation_service(stores: dict) -> ReservationService:
    return ReservationService(**stores)


@pytest.fixture
def waiting_service(stores: dict) -> WaitingService:
    return WaitingService(**stores)


@pytest.fixture
def slot(fake_db: FakeDatabase) -> dict:
    """The (2025-06-01, 10:00, Dungeon) slot as service keyword arguments."""
    theme = fake_db.add_theme("Dungeon")
    reservation_time = fake_db.add_time(time(10, 0))
    return {
        "date": date(2025, 6, 1),
        "time_id": reservation_time.id.value,
        "theme_id": theme.id.value,
    }


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
