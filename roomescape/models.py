"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Members are the project's auth users.
"""

from django.conf import settings
from django.db import models


class Theme(models.Model):
    """Persistence model for escape room themes."""

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    thumbnail = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class ReservationTime(models.Model):
    """Persistence model for bookable start times."""

    start_at = models.TimeField(unique=True)

    class Meta:
        ordering = ["start_at"]

    def __str__(self) -> str:
        return self.start_at.strftime("%H:%M")


class Reservation(models.Model):
    """Persistence model for confirmed reservations."""

    member = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reservations"
    )
    date = models.DateField()
    time = models.ForeignKey(
        ReservationTime, on_delete=models.PROTECT, related_name="reservations"
    )
    theme = models.ForeignKey(Theme, on_delete=models.PROTECT, related_name="reservations")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date", "time__start_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["date", "time", "theme"], name="unique_reservation_schedule"
            ),
        ]
        indexes = [
            models.Index(fields=["member", "date"], name="idx_reservation_member_date"),
            models.Index(fields=["theme", "date"], name="idx_reservation_theme_date"),
        ]

    def __str__(self) -> str:
        return f"{self.theme.name} - {self.date} {self.time}"


class Waiting(models.Model):
    """Persistence model for waitlist entries."""

    member = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="waitings"
    )
    date = models.DateField()
    time = models.ForeignKey(ReservationTime, on_delete=models.PROTECT, related_name="waitings")
    theme = models.ForeignKey(Theme, on_delete=models.PROTECT, related_name="waitings")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["member", "date", "time", "theme"],
                name="unique_waiting_member_schedule",
            ),
        ]
        indexes = [
            models.Index(
                fields=["date", "time", "theme", "created_at"],
                name="idx_waiting_schedule_created",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.member} waiting for {self.theme.name} - {self.date} {self.time}"
