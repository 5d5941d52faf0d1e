"""Explicit construction of stores and services.

Built once by RoomescapeConfig.ready() and read by the handlers through the
app config.
"""

from dataclasses import dataclass
from datetime import timedelta

from roomescape.services import ReservationService, WaitingService
from roomescape.stores import ReferenceStore
from roomescape.stores.django_store import (
    DjangoReferenceStore,
    DjangoReservationStore,
    DjangoUnitOfWork,
    DjangoWaitingStore,
)


@dataclass(frozen=True)
class Services:
    references: ReferenceStore
    reservations: ReservationService
    waitings: WaitingService


def build_services(booking_cutoff: timedelta) -> Services:
    references = DjangoReferenceStore()
    reservation_store = DjangoReservationStore()
    waiting_store = DjangoWaitingStore()
    unit_of_work = DjangoUnitOfWork()
    return Services(
        references=references,
        reservations=ReservationService(
            references,
            reservation_store,
            waiting_store,
            unit_of_work,
            booking_cutoff=booking_cutoff,
        ),
        waitings=WaitingService(references, reservation_store, waiting_store, unit_of_work),
    )
