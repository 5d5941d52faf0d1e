from django.urls import path

from roomescape.handlers import (
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

urlpatterns = [
    path("themes", ThemeListView.as_view(), name="theme-list"),
    path("times", TimeListView.as_view(), name="time-list"),
    path("reservations", ReservationCreateView.as_view(), name="reservation-create"),
    path("reservations/mine", MyReservationListView.as_view(), name="reservation-mine"),
    path("waitings", WaitingCreateView.as_view(), name="waiting-create"),
    path("waitings/mine", MyWaitingListView.as_view(), name="waiting-mine"),
    path("waitings/<int:waiting_id>", WaitingDetailView.as_view(), name="waiting-detail"),
    path(
        "admin/reservations",
        AdminReservationListView.as_view(),
        name="admin-reservation-list",
    ),
    path(
        "admin/reservations/<int:reservation_id>",
        AdminReservationDetailView.as_view(),
        name="admin-reservation-detail",
    ),
    path("admin/waitings", AdminWaitingListView.as_view(), name="admin-waiting-list"),
    path(
        "admin/waitings/approve-first",
        AdminWaitingApproveFirstView.as_view(),
        name="admin-waiting-approve-first",
    ),
    path(
        "admin/waitings/<int:waiting_id>",
        AdminWaitingDetailView.as_view(),
        name="admin-waiting-detail",
    ),
    path(
        "admin/waitings/<int:waiting_id>/approve",
        AdminWaitingApproveView.as_view(),
        name="admin-waiting-approve",
    ),
]
