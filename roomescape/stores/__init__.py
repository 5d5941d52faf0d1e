from roomescape.stores.interfaces import (
    DuplicateEntryError,
    ReferenceStore,
    ReservationStore,
    UnitOfWork,
    WaitingStore,
)

__all__ = [
    "DuplicateEntryError",
    "ReferenceStore",
    "ReservationStore",
    "UnitOfWork",
    "WaitingStore",
]
