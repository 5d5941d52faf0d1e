from roomescape.services.reservation_service import ReservationService
from roomescape.services.waiting_service import WaitingService

__all__ = ["ReservationService", "WaitingService"]
