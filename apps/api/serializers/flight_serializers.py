"""
Flight Serializers

REST API serializers for flight records. Input serializers only coerce
types; business rules are enforced by the validation layer so that every
violation is reported together.
"""

from rest_framework import serializers

from apps.core.models import Flight


class FlightSerializer(serializers.ModelSerializer):
    """Read representation of a flight."""

    class Meta:
        model = Flight
        fields = [
            'id',
            'flight_number',
            'airline',
            'departure_airport',
            'arrival_airport',
            'departure_time',
            'arrival_time',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class FlightCreateSerializer(serializers.Serializer):
    """Serializer for creating new flights."""

    flight_number = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    airline = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    departure_airport = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    arrival_airport = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    departure_time = serializers.DateTimeField(required=False, allow_null=True)
    arrival_time = serializers.DateTimeField(required=False, allow_null=True)
    status = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Scheduled, Delayed, Cancelled, InAir or Landed (any case)"
    )


class FlightUpdateSerializer(FlightCreateSerializer):
    """Serializer for replacing an existing flight (full update, no partial)."""


class FlightSearchSerializer(serializers.Serializer):
    """Query parameters for flight search."""

    airline = serializers.CharField(required=False, allow_blank=True)
    departure_airport = serializers.CharField(required=False, allow_blank=True)
    arrival_airport = serializers.CharField(required=False, allow_blank=True)
    departure_from_date = serializers.DateTimeField(required=False)
    departure_to_date = serializers.DateTimeField(required=False)
    status = serializers.CharField(required=False, allow_blank=True)
