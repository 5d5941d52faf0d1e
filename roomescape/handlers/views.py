"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers.errors.exception_handler
- Never contain business logic
- Never expose internal error details
"""

from django.apps import apps
from django.conf import settings
from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from roomescape.cache_keys import THEMES_CACHE_KEY, TIMES_CACHE_KEY
from roomescape.handlers.serializers import (
    ReservationFilterSerializer,
    ReservationSerializer,
    ReservationTimeSerializer,
    ScheduleRequestSerializer,
    ThemeSerializer,
    WaitingSerializer,
    WaitingWithRankSerializer,
)
from roomescape.wiring import Services


def get_services() -> Services:
    return apps.get_app_config("roomescape").services


def _schedule_input(request: Request) -> dict:
    serializer = ScheduleRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class ThemeListView(APIView):
    """Handler for GET /api/themes"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        data = cache.get_or_set(
            THEMES_CACHE_KEY,
            lambda: list(
                ThemeSerializer(get_services().references.list_themes(), many=True).data
            ),
            timeout=settings.ROOMESCAPE_CATALOG_CACHE_TTL,
        )
        return Response(data)


class TimeListView(APIView):
    """Handler for GET /api/times"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        data = cache.get_or_set(
            TIMES_CACHE_KEY,
            lambda: list(
                ReservationTimeSerializer(get_services().references.list_times(), many=True).data
            ),
            timeout=settings.ROOMESCAPE_CATALOG_CACHE_TTL,
        )
        return Response(data)


class ReservationCreateView(APIView):
    """Handler for POST /api/reservations"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        reservation = get_services().reservations.create(
            member_id=request.user.pk, now=timezone.localtime(), **_schedule_input(request)
        )
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)


class MyReservationListView(APIView):
    """Handler for GET /api/reservations/mine"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        reservations = get_services().reservations.find_by_member(request.user.pk)
        return Response(ReservationSerializer(reservations, many=True).data)


class AdminReservationListView(APIView):
    """Handler for GET /api/admin/reservations"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        filters = ReservationFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        service = get_services().reservations
        if filters.validated_data:
            reservations = service.find_by_conditions(**filters.validated_data)
        else:
            reservations = service.find_all()
        return Response(ReservationSerializer(reservations, many=True).data)


class AdminReservationDetailView(APIView):
    """Handler for GET/DELETE /api/admin/reservations/{reservation_id}"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, reservation_id: int) -> Response:
        reservation = get_services().reservations.find_by_id(reservation_id)
        return Response(ReservationSerializer(reservation).data)

    def delete(self, request: Request, reservation_id: int) -> Response:
        get_services().reservations.delete_and_promote(reservation_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class WaitingCreateView(APIView):
    """Handler for POST /api/waitings"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        waiting = get_services().waitings.create(
            member_id=request.user.pk, **_schedule_input(request)
        )
        return Response(WaitingSerializer(waiting).data, status=status.HTTP_201_CREATED)


class MyWaitingListView(APIView):
    """Handler for GET /api/waitings/mine"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        ranks = get_services().waitings.find_ranks_by_member(request.user.pk)
        return Response(WaitingWithRankSerializer(ranks, many=True).data)


class WaitingDetailView(APIView):
    """Handler for DELETE /api/waitings/{waiting_id}"""

    permission_classes = [IsAuthenticated]

    def delete(self, request: Request, waiting_id: int) -> Response:
        get_services().waitings.delete_by_member_and_id(request.user.pk, waiting_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminWaitingListView(APIView):
    """Handler for GET /api/admin/waitings"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        waitings = get_services().waitings.find_all()
        return Response(WaitingSerializer(waitings, many=True).data)


class AdminWaitingDetailView(APIView):
    """Handler for DELETE /api/admin/waitings/{waiting_id}"""

    permission_classes = [IsAdminUser]

    def delete(self, request: Request, waiting_id: int) -> Response:
        get_services().waitings.delete_by_id(waiting_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminWaitingApproveView(APIView):
    """Handler for POST /api/admin/waitings/{waiting_id}/approve"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, waiting_id: int) -> Response:
        reservation = get_services().waitings.approve(waiting_id)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)


class AdminWaitingApproveFirstView(APIView):
    """Handler for POST /api/admin/waitings/approve-first"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request) -> Response:
        reservation = get_services().waitings.approve_first(**_schedule_input(request))
        if reservation is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)
