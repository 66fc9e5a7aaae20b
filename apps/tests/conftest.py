"""
Pytest Configuration and Fixtures

Shared fixtures for flight information tests.
"""

from datetime import timedelta

import pytest
from django.utils import timezone


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def now():
    """Fixed reference time for rule checks."""
    return timezone.now().replace(microsecond=0)


@pytest.fixture
def flight_payload(now):
    """Generate a valid flight payload departing tomorrow."""
    return {
        'flight_number': 'NZ123',
        'airline': 'Air New Zealand',
        'departure_airport': 'AKL',
        'arrival_airport': 'CHC',
        'departure_time': now + timedelta(days=1),
        'arrival_time': now + timedelta(days=1, hours=1, minutes=20),
        'status': 'Scheduled',
    }


@pytest.fixture
def second_flight_payload(now):
    """Generate another valid flight payload."""
    return {
        'flight_number': 'JQ456',
        'airline': 'Jetstar',
        'departure_airport': 'WLG',
        'arrival_airport': 'AKL',
        'departure_time': now + timedelta(days=2),
        'arrival_time': now + timedelta(days=2, hours=1),
        'status': 'Delayed',
    }


@pytest.fixture
def api_payload(flight_payload):
    """Flight payload with ISO 8601 times, as posted by clients."""
    return {
        **flight_payload,
        'departure_time': flight_payload['departure_time'].isoformat(),
        'arrival_time': flight_payload['arrival_time'].isoformat(),
    }


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def flight(db, flight_payload):
    """Create a flight in database."""
    from apps.core.models import Flight
    return Flight.objects.create(**flight_payload)


@pytest.fixture
def other_flight(db, second_flight_payload):
    """Create a second flight in database."""
    from apps.core.models import Flight
    return Flight.objects.create(**second_flight_payload)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def flight_service():
    """Get FlightService class."""
    from apps.core.services import FlightService
    return FlightService


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest.fixture
def api_client():
    """Get Django REST framework API client."""
    from rest_framework.test import APIClient
    return APIClient()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def create_multiple_flights(db, now):
    """Factory fixture for creating multiple flights."""
    from apps.core.models import Flight

    def _create_flights(count=5, **overrides):
        flights = []
        for i in range(count):
            data = {
                'flight_number': f'NZ{100 + i}',
                'airline': 'Air New Zealand',
                'departure_airport': 'AKL',
                'arrival_airport': 'CHC',
                'departure_time': now + timedelta(hours=count - i),
                'arrival_time': now + timedelta(hours=count - i + 1),
                'status': 'Scheduled',
                **overrides,
            }
            flights.append(Flight.objects.create(**data))
        return flights

    return _create_flights
