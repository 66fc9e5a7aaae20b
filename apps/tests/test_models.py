"""
Model Tests

Tests for the flight model and status choices.
"""

from datetime import timedelta

import pytest
from django.db import IntegrityError, transaction

from apps.core.models import Flight, FlightStatus


# =============================================================================
# FlightStatus Tests
# =============================================================================

class TestFlightStatus:
    """Tests for FlightStatus."""

    @pytest.mark.parametrize('value,expected', [
        ('Scheduled', FlightStatus.SCHEDULED),
        ('scheduled', FlightStatus.SCHEDULED),
        ('INAIR', FlightStatus.IN_AIR),
        ('Landed', FlightStatus.LANDED),
    ])
    def test_parse_names(self, value, expected):
        """Test parsing known status names."""
        assert FlightStatus.parse(value) == expected

    @pytest.mark.parametrize('value', [None, '', 'In Air', 'Boarding', 3])
    def test_parse_rejects(self, value):
        """Test values that name no status."""
        assert FlightStatus.parse(value) is None

    def test_parse_member(self):
        """Test members parse to themselves."""
        assert FlightStatus.parse(FlightStatus.DELAYED) is FlightStatus.DELAYED

    def test_names(self):
        """Test the status list used in messages."""
        assert FlightStatus.names() == "Scheduled, Delayed, Cancelled, InAir, Landed"


# =============================================================================
# Flight Model Tests
# =============================================================================

@pytest.mark.django_db
class TestFlightModel:
    """Tests for Flight model."""

    def test_create_flight(self, flight):
        """Test creating a flight."""
        assert flight.id is not None
        assert flight.created_at is not None
        assert flight.updated_at is not None
        assert flight.status == FlightStatus.SCHEDULED

    def test_str(self, flight):
        """Test string representation."""
        assert str(flight) == "NZ123 AKL-CHC"

    def test_default_status(self, flight_payload):
        """Test status defaults to Scheduled."""
        del flight_payload['status']

        created = Flight.objects.create(**flight_payload)

        assert created.status == FlightStatus.SCHEDULED

    def test_flight_number_unique(self, flight, flight_payload):
        """Test the store rejects a second record with the same number."""
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Flight.objects.create(**flight_payload)

    def test_default_ordering(self, create_multiple_flights):
        """Test flights are ordered by departure time."""
        create_multiple_flights(count=4)

        departures = list(Flight.objects.values_list('departure_time', flat=True))

        assert departures == sorted(departures)

    def test_ties_ordered_by_id(self, create_multiple_flights, now):
        """Test equal departure times fall back to insertion order."""
        flights = create_multiple_flights(
            count=3,
            departure_time=now + timedelta(days=1),
            arrival_time=now + timedelta(days=1, hours=2),
        )

        assert list(Flight.objects.by_departure()) == flights

    def test_airline_key_follows_airline(self, flight):
        """Test the case-folded search key is refreshed on every save."""
        assert flight.airline_key == 'air new zealand'

        flight.airline = 'ÅLESUND AIR'
        flight.save(update_fields=['airline'])
        flight.refresh_from_db()

        assert flight.airline_key == 'ålesund air'

    def test_to_payload(self, flight, flight_payload):
        """Test the record maps back to its payload."""
        assert flight.to_payload() == flight_payload
