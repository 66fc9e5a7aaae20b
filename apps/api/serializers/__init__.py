"""
Flight Information API Serializers

REST API serializers for flight management.
"""

from .flight_serializers import (
    FlightSerializer,
    FlightCreateSerializer,
    FlightUpdateSerializer,
    FlightSearchSerializer,
)

__all__ = [
    'FlightSerializer',
    'FlightCreateSerializer',
    'FlightUpdateSerializer',
    'FlightSearchSerializer',
]
