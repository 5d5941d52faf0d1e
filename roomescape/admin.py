from django.contrib import admin

from roomescape.models import Reservation, ReservationTime, Theme, Waiting


@admin.register(Theme)
class ThemeAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(ReservationTime)
class ReservationTimeAdmin(admin.ModelAdmin):
    list_display = ["start_at"]


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ["theme", "date", "time", "member", "created_at"]
    list_filter = ["theme", "date"]
    search_fields = ["member__username", "member__email"]


@admin.register(Waiting)
class WaitingAdmin(admin.ModelAdmin):
    list_display = ["theme", "date", "time", "member", "created_at"]
    list_filter = ["theme", "date"]
    search_fields = ["member__username", "member__email"]
