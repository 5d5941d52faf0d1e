from datetime import timedelta

from django.apps import AppConfig
from django.conf import settings


class RoomescapeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "roomescape"
    verbose_name = "Room escape reservations"

    def ready(self) -> None:
        from roomescape import signals  # noqa: F401
        from roomescape.wiring import build_services

        self.services = build_services(
            booking_cutoff=timedelta(minutes=settings.ROOMESCAPE_BOOKING_CUTOFF_MINUTES)
        )
