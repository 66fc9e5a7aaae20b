"""
Flight Model

Persisted flight record and the closed set of flight statuses.
"""

from typing import Any, Dict, Optional

from django.db import models


def airline_search_key(value: str) -> str:
    """Unicode case folding, so matching never relies on database collation."""
    return (value or '').casefold()


class FlightStatus(models.TextChoices):
    """
    Operational status of a flight.

    Values are the status names as exposed over the API. Incoming strings
    are matched case-insensitively through ``parse``.
    """

    SCHEDULED = 'Scheduled', 'Scheduled'
    DELAYED = 'Delayed', 'Delayed'
    CANCELLED = 'Cancelled', 'Cancelled'
    IN_AIR = 'InAir', 'In Air'
    LANDED = 'Landed', 'Landed'

    @classmethod
    def parse(cls, value: Any) -> Optional['FlightStatus']:
        """
        Resolve a status name case-insensitively.

        Returns:
            Matching FlightStatus member, or None if the value names no status
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value:
            return None

        wanted = value.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None

    @classmethod
    def names(cls) -> str:
        """Comma separated status names, for error messages."""
        return ', '.join(member.value for member in cls)


class FlightQuerySet(models.QuerySet):
    """Query helpers for flight records."""

    def by_departure(self):
        """Ascending departure time; record identity breaks ties."""
        return self.order_by('departure_time', 'id')

    def matching(self, predicate: models.Q):
        """Apply a search predicate and order the matches by departure."""
        return self.filter(predicate).by_departure()


class Flight(models.Model):
    """
    A single scheduled flight.

    Mutable fields are fully replaced on update; created_at and
    updated_at are maintained by the ORM.
    """

    flight_number = models.CharField(
        max_length=10,
        unique=True,
        help_text="Carrier code and number, e.g. NZ123"
    )
    airline = models.CharField(
        max_length=100,
        help_text="Operating airline name"
    )
    airline_key = models.TextField(
        editable=False,
        default='',
        help_text="Case-folded airline name used for search"
    )
    departure_airport = models.CharField(
        max_length=5,
        help_text="IATA or ICAO code of the origin airport"
    )
    arrival_airport = models.CharField(
        max_length=5,
        help_text="IATA or ICAO code of the destination airport"
    )
    departure_time = models.DateTimeField(
        help_text="Scheduled departure (UTC)"
    )
    arrival_time = models.DateTimeField(
        help_text="Scheduled arrival (UTC)"
    )
    status = models.CharField(
        max_length=20,
        choices=FlightStatus.choices,
        default=FlightStatus.SCHEDULED,
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = FlightQuerySet.as_manager()

    class Meta:
        db_table = 'flights'
        ordering = ['departure_time', 'id']
        indexes = [
            models.Index(fields=['departure_airport', 'departure_time'], name='flights_dep_airport_time_idx'),
            models.Index(fields=['arrival_airport', 'arrival_time'], name='flights_arr_airport_time_idx'),
        ]

    def __str__(self):
        return f"{self.flight_number} {self.departure_airport}-{self.arrival_airport}"

    def save(self, *args, **kwargs):
        self.airline_key = airline_search_key(self.airline)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'airline' in update_fields:
            kwargs['update_fields'] = {*update_fields, 'airline_key'}
        super().save(*args, **kwargs)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def to_payload(self) -> Dict[str, Any]:
        """Map the record back to a create/update shaped payload."""
        return {
            'flight_number': self.flight_number,
            'airline': self.airline,
            'departure_airport': self.departure_airport,
            'arrival_airport': self.arrival_airport,
            'departure_time': self.departure_time,
            'arrival_time': self.arrival_time,
            'status': self.status,
        }
