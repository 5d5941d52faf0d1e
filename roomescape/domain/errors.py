"""Domain error codes for the roomescape module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
    WAITING_NOT_FOUND = "WAITING_NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    THEME_NOT_FOUND = "THEME_NOT_FOUND"
    RESERVATION_TIME_NOT_FOUND = "RESERVATION_TIME_NOT_FOUND"
    RESERVATION_UNAVAILABLE = "RESERVATION_UNAVAILABLE"
    DELETION_NOT_ALLOWED = "DELETION_NOT_ALLOWED"
    INVALID_ID = "INVALID_ID"


NOT_FOUND_CODES = frozenset(
    {
        ErrorCode.RESERVATION_NOT_FOUND,
        ErrorCode.WAITING_NOT_FOUND,
        ErrorCode.MEMBER_NOT_FOUND,
        ErrorCode.THEME_NOT_FOUND,
        ErrorCode.RESERVATION_TIME_NOT_FOUND,
    }
)


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ReservationNotFoundError(DomainError):
    """Raised when a reservation is not found."""

    def __init__(self, reservation_id: object) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_NOT_FOUND,
            message=f"Reservation {reservation_id} not found",
        )


class WaitingNotFoundError(DomainError):
    """Raised when a waiting is not found."""

    def __init__(self, waiting_id: object) -> None:
        super().__init__(
            code=ErrorCode.WAITING_NOT_FOUND,
            message=f"Waiting {waiting_id} not found",
        )


class MemberNotFoundError(DomainError):
    """Raised when a member is not found."""

    def __init__(self, member_id: object) -> None:
        super().__init__(
            code=ErrorCode.MEMBER_NOT_FOUND,
            message=f"Member {member_id} not found",
        )


class ThemeNotFoundError(DomainError):
    """Raised when a theme is not found."""

    def __init__(self, theme_id: object) -> None:
        super().__init__(
            code=ErrorCode.THEME_NOT_FOUND,
            message=f"Theme {theme_id} not found",
        )


class ReservationTimeNotFoundError(DomainError):
    """Raised when a reservation time is not found."""

    def __init__(self, time_id: object) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_TIME_NOT_FOUND,
            message=f"Reservation time {time_id} not found",
        )


class UnavailableReservationError(DomainError):
    """Raised when a booking rule rejects the request."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.RESERVATION_UNAVAILABLE, message=message)


class DuplicateReservationError(UnavailableReservationError):
    def __init__(self) -> None:
        super().__init__("A reservation already exists for this theme, date and time")


class DuplicateWaitingError(UnavailableReservationError):
    def __init__(self) -> None:
        super().__init__("You are already waiting for this theme, date and time")


class PastReservationError(UnavailableReservationError):
    def __init__(self) -> None:
        super().__init__("Reservations for a past date and time are not allowed")


class ReservationTooSoonError(UnavailableReservationError):
    def __init__(self, minutes: int) -> None:
        super().__init__(
            f"Reservations close {minutes} minutes before the session starts"
        )


class DeletionNotAllowedError(DomainError):
    """Raised when a member deletes a waiting they do not own."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DELETION_NOT_ALLOWED,
            message="You can only cancel your own waiting",
        )


class InvalidIdError(DomainError):
    """Raised when an identifier is malformed."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {field} format",
        )
