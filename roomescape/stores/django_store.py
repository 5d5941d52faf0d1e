"""Django ORM implementations of the roomescape stores."""

from contextlib import AbstractContextManager
from datetime import date

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count, IntegerField, OuterRef, Q, QuerySet, Subquery
from django.db.models.functions import Coalesce

from roomescape import models as orm
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
from roomescape.stores.interfaces import (
    DuplicateEntryError,
    ReferenceStore,
    ReservationStore,
    UnitOfWork,
    WaitingStore,
)


def to_member(user) -> Member:
    return Member(
        id=MemberId(user.pk),
        name=user.get_full_name() or user.get_username(),
        email=user.email,
    )


def to_theme(record: orm.Theme) -> Theme:
    return Theme(
        id=ThemeId(record.pk),
        name=record.name,
        description=record.description,
        thumbnail=record.thumbnail or None,
    )


def to_time(record: orm.ReservationTime) -> ReservationTime:
    return ReservationTime(id=TimeId(record.pk), start_at=record.start_at)


def to_reservation(record: orm.Reservation) -> Reservation:
    return Reservation(
        id=ReservationId(record.pk),
        member=to_member(record.member),
        date=record.date,
        time=to_time(record.time),
        theme=to_theme(record.theme),
        created_at=record.created_at,
    )


def to_waiting(record: orm.Waiting) -> Waiting:
    return Waiting(
        id=WaitingId(record.pk),
        member=to_member(record.member),
        date=record.date,
        time=to_time(record.time),
        theme=to_theme(record.theme),
        created_at=record.created_at,
    )


def _schedule_filter(schedule: Schedule) -> dict:
    return {
        "date": schedule.date,
        "time_id": schedule.time_id.value,
        "theme_id": schedule.theme_id.value,
    }


class DjangoUnitOfWork(UnitOfWork):
    """Unit of work backed by a database transaction."""

    def atomic(self) -> AbstractContextManager[None]:
        return transaction.atomic()


class DjangoReferenceStore(ReferenceStore):
    """Resolves members from the auth user table and themes/times from the ORM."""

    def get_member(self, member_id: MemberId) -> Member | None:
        user = get_user_model().objects.filter(pk=member_id.value).first()
        return to_member(user) if user is not None else None

    def get_theme(self, theme_id: ThemeId) -> Theme | None:
        record = orm.Theme.objects.filter(pk=theme_id.value).first()
        return to_theme(record) if record is not None else None

    def get_time(self, time_id: TimeId) -> ReservationTime | None:
        record = orm.ReservationTime.objects.filter(pk=time_id.value).first()
        return to_time(record) if record is not None else None

    def list_themes(self) -> list[Theme]:
        return [to_theme(record) for record in orm.Theme.objects.order_by("name")]

    def list_times(self) -> list[ReservationTime]:
        return [to_time(record) for record in orm.ReservationTime.objects.order_by("start_at")]


class DjangoReservationStore(ReservationStore):
    """PostgreSQL-backed reservation store using Django ORM."""

    def _queryset(self) -> QuerySet:
        return orm.Reservation.objects.select_related("member", "time", "theme").order_by(
            "date", "time__start_at", "id"
        )

    def exists_by_schedule(self, schedule: Schedule) -> bool:
        return orm.Reservation.objects.filter(**_schedule_filter(schedule)).exists()

    def get(self, reservation_id: ReservationId) -> Reservation | None:
        record = self._queryset().filter(pk=reservation_id.value).first()
        return to_reservation(record) if record is not None else None

    def list_all(self) -> list[Reservation]:
        return [to_reservation(record) for record in self._queryset()]

    def list_by_conditions(
        self,
        member_id: MemberId | None = None,
        theme_id: ThemeId | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Reservation]:
        queryset = self._queryset()
        if member_id is not None:
            queryset = queryset.filter(member_id=member_id.value)
        if theme_id is not None:
            queryset = queryset.filter(theme_id=theme_id.value)
        if date_from is not None:
            queryset = queryset.filter(date__gte=date_from)
        if date_to is not None:
            queryset = queryset.filter(date__lte=date_to)
        return [to_reservation(record) for record in queryset]

    def list_by_member(self, member_id: MemberId) -> list[Reservation]:
        return self.list_by_conditions(member_id=member_id)

    def create(self, member_id: MemberId, schedule: Schedule) -> Reservation:
        try:
            with transaction.atomic():
                record = orm.Reservation.objects.create(
                    member_id=member_id.value, **_schedule_filter(schedule)
                )
        except IntegrityError as exc:
            raise DuplicateEntryError(f"Schedule already reserved: {schedule}") from exc
        return to_reservation(self._queryset().get(pk=record.pk))

    def delete(self, reservation_id: ReservationId) -> None:
        orm.Reservation.objects.filter(pk=reservation_id.value).delete()


class DjangoWaitingStore(WaitingStore):
    """PostgreSQL-backed waitlist store using Django ORM."""

    def _queryset(self) -> QuerySet:
        return orm.Waiting.objects.select_related("member", "time", "theme").order_by(
            "created_at", "id"
        )

    def exists(self, waiting_id: WaitingId) -> bool:
        return orm.Waiting.objects.filter(pk=waiting_id.value).exists()

    def exists_by_member_and_schedule(self, member_id: MemberId, schedule: Schedule) -> bool:
        return orm.Waiting.objects.filter(
            member_id=member_id.value, **_schedule_filter(schedule)
        ).exists()

    def get(self, waiting_id: WaitingId) -> Waiting | None:
        record = self._queryset().filter(pk=waiting_id.value).first()
        return to_waiting(record) if record is not None else None

    def list_all(self) -> list[Waiting]:
        return [to_waiting(record) for record in self._queryset()]

    def first_for_schedule(self, schedule: Schedule) -> Waiting | None:
        record = self._queryset().filter(**_schedule_filter(schedule)).first()
        return to_waiting(record) if record is not None else None

    def list_for_schedule(self, schedule: Schedule) -> list[Waiting]:
        return [
            to_waiting(record)
            for record in self._queryset().filter(**_schedule_filter(schedule))
        ]

    def list_ranked_by_member(self, member_id: MemberId) -> list[WaitingWithRank]:
        ahead = (
            orm.Waiting.objects.filter(
                date=OuterRef("date"),
                time_id=OuterRef("time_id"),
                theme_id=OuterRef("theme_id"),
            )
            .filter(
                Q(created_at__lt=OuterRef("created_at"))
                | Q(created_at=OuterRef("created_at"), id__lt=OuterRef("id"))
            )
            .order_by()
            .values("theme_id")
            .annotate(count=Count("id"))
            .values("count")
        )
        queryset = (
            self._queryset()
            .filter(member_id=member_id.value)
            .annotate(rank=Coalesce(Subquery(ahead, output_field=IntegerField()), 0))
        )
        return [
            WaitingWithRank(waiting=to_waiting(record), rank=record.rank)
            for record in queryset
        ]

    def create(self, member_id: MemberId, schedule: Schedule) -> Waiting:
        try:
            with transaction.atomic():
                record = orm.Waiting.objects.create(
                    member_id=member_id.value, **_schedule_filter(schedule)
                )
        except IntegrityError as exc:
            raise DuplicateEntryError(
                f"Member {member_id} already waits for {schedule}"
            ) from exc
        return to_waiting(self._queryset().get(pk=record.pk))

    def delete(self, waiting_id: WaitingId) -> None:
        orm.Waiting.objects.filter(pk=waiting_id.value).delete()
