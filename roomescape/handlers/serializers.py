"""Serializers for request input and for rendering domain models."""

from rest_framework import serializers


class ScheduleRequestSerializer(serializers.Serializer):
    """Input for booking, joining a waitlist or approving the first waiting."""

    date = serializers.DateField()
    time_id = serializers.IntegerField(min_value=1)
    theme_id = serializers.IntegerField(min_value=1)


class ReservationFilterSerializer(serializers.Serializer):
    """Query parameters for the admin reservation search."""

    memberId = serializers.IntegerField(source="member_id", min_value=1, required=False)
    themeId = serializers.IntegerField(source="theme_id", min_value=1, required=False)
    dateFrom = serializers.DateField(source="date_from", required=False)
    dateTo = serializers.DateField(source="date_to", required=False)

    def validate(self, attrs):
        date_from, date_to = attrs.get("date_from"), attrs.get("date_to")
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError("dateFrom must not be after dateTo")
        return attrs


class MemberSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()


class ThemeSerializer(serializers.Serializer):
    """Serializer for Theme domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    thumbnail = serializers.CharField(allow_null=True)


class ReservationTimeSerializer(serializers.Serializer):
    """Serializer for ReservationTime domain model."""

    id = serializers.IntegerField(source="id.value")
    start_at = serializers.TimeField(format="%H:%M")


class ReservationSerializer(serializers.Serializer):
    """Serializer for Reservation domain model."""

    id = serializers.IntegerField(source="id.value")
    member = MemberSerializer()
    date = serializers.DateField()
    time = ReservationTimeSerializer()
    theme = ThemeSerializer()


class WaitingSerializer(serializers.Serializer):
    """Serializer for Waiting domain model."""

    id = serializers.IntegerField(source="id.value")
    member = MemberSerializer()
    date = serializers.DateField()
    time = ReservationTimeSerializer()
    theme = ThemeSerializer()
    created_at = serializers.DateTimeField()


class WaitingWithRankSerializer(serializers.Serializer):
    """A member's view of one of their waitings."""

    id = serializers.IntegerField(source="waiting.id.value")
    theme = serializers.CharField(source="waiting.theme.name")
    date = serializers.DateField(source="waiting.date")
    start_at = serializers.TimeField(source="waiting.time.start_at", format="%H:%M")
    rank = serializers.IntegerField()
