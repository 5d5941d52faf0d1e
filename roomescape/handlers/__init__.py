from roomescape.handlers.views import (
    AdminReservationDetailView,
    AdminReservationListView,
    AdminWaitingApproveFirstView,
    AdminWaitingApproveView,
    AdminWaitingDetailView,
    AdminWaitingListView,
    MyReservationListView,
    MyWaitingListView,
    ReservationCreateView,
    ThemeListView,
    TimeListView,
    WaitingCreateView,
    WaitingDetailView,
)

__all__ = [
    "AdminReservationDetailView",
    "AdminReservationListView",
    "AdminWaitingApproveFirstView",
    "AdminWaitingApproveView",
    "AdminWaitingDetailView",
    "AdminWaitingListView",
    "MyReservationListView",
    "MyWaitingListView",
    "ReservationCreateView",
    "ThemeListView",
    "TimeListView",
    "WaitingCreateView",
    "WaitingDetailView",
]
