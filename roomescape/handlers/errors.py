"""Mapping of domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from roomescape.domain.errors import NOT_FOUND_CODES, DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.RESERVATION_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.DELETION_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    **{code: status.HTTP_404_NOT_FOUND for code in NOT_FOUND_CODES},
}


def exception_handler(exc, context):
    """DRF exception handler that renders DomainError as {code, message}."""
    if isinstance(exc, DomainError):
        logger.info("Request rejected: %s", exc)
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE[exc.code],
        )
    return drf_exception_handler(exc, context)
