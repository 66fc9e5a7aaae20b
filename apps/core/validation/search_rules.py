"""
Flight Search Rules

Validates sparse search criteria and composes them into a single ORM
predicate. Populated criteria are AND-ed together; blank ones impose no
constraint.

Airline matching is a case-insensitive substring test on the stored
case-folded airline key, so the result does not depend on how the database
folds case (SQLite LIKE only folds ASCII).
"""

from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional

from django.conf import settings
from django.db.models import Q
from django.utils import timezone

from apps.core.models import FlightStatus, airline_search_key
from .formats import (
    AIRLINE_LENGTH,
    AIRPORT_CODE_LENGTH,
    as_utc,
    is_airport_code,
    is_blank,
    length_between,
)
from .results import FieldError, ValidationResult

DEFAULT_MAX_RANGE_DAYS = 365
DEFAULT_MAX_PAST_DAYS = 365
DEFAULT_MAX_FUTURE_DAYS = 730


@dataclass(frozen=True)
class SearchCriteria:
    """Optional filters for a flight search."""

    airline: Optional[str] = None
    departure_airport: Optional[str] = None
    arrival_airport: Optional[str] = None
    departure_from_date: Optional[datetime] = None
    departure_to_date: Optional[datetime] = None
    status: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'SearchCriteria':
        """Build criteria from a mapping, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def populated(self) -> List[str]:
        """Names of the criteria that carry a value."""
        return [f.name for f in fields(self) if not is_blank(getattr(self, f.name))]

    @property
    def is_empty(self) -> bool:
        return not self.populated()


def _setting(name: str, default: int) -> int:
    return getattr(settings, name, default)


# =============================================================================
# Validation
# =============================================================================

def _check_airport(value: Optional[str], field_name: str, example: str) -> List[FieldError]:
    if is_blank(value):
        return []
    if length_between(value, AIRPORT_CODE_LENGTH) and is_airport_code(value):
        return []
    label = "Departure" if field_name == 'departure_airport' else "Arrival"
    return [FieldError(
        field_name,
        f"{label} airport code must be 3-4 uppercase letters (e.g., {example})."
    )]


def _check_dates(criteria: SearchCriteria, now: datetime) -> List[FieldError]:
    errors = []
    start = criteria.departure_from_date
    end = criteria.departure_to_date
    start = as_utc(start) if start is not None else None
    end = as_utc(end) if end is not None else None

    if start is not None and end is not None and start >= end:
        errors.append(FieldError(
            'departure_from_date',
            "Departure from date must be before departure to date."
        ))

    if start is not None:
        max_past = _setting('FLIGHT_SEARCH_MAX_PAST_DAYS', DEFAULT_MAX_PAST_DAYS)
        if start < now - timedelta(days=max_past):
            errors.append(FieldError(
                'departure_from_date',
                "Departure from date cannot be more than 1 year in the past."
            ))

    if end is not None:
        max_future = _setting('FLIGHT_SEARCH_MAX_FUTURE_DAYS', DEFAULT_MAX_FUTURE_DAYS)
        if end > now + timedelta(days=max_future):
            errors.append(FieldError(
                'departure_to_date',
                "Departure to date cannot be more than 2 years in the future."
            ))

    if start is not None and end is not None:
        max_range = _setting('FLIGHT_SEARCH_MAX_RANGE_DAYS', DEFAULT_MAX_RANGE_DAYS)
        if end - start > timedelta(days=max_range):
            errors.append(FieldError(
                'departure_to_date',
                f"Date range cannot exceed {max_range} days."
            ))

    return errors


def validate_search(
    criteria: SearchCriteria,
    now: Optional[datetime] = None
) -> ValidationResult:
    """
    Validate search criteria.

    Each populated criterion must satisfy its own format, the date bounds
    must form a sane window around ``now``, and at least one criterion
    must be given.

    Args:
        criteria: Search filters
        now: Reference time, defaults to the current UTC time

    Returns:
        ValidationResult with every violated rule
    """
    now = as_utc(now or timezone.now())
    errors: List[FieldError] = []

    if not is_blank(criteria.airline) and not length_between(criteria.airline, AIRLINE_LENGTH):
        errors.append(FieldError(
            'airline',
            "Airline name must be between 2 and 100 characters."
        ))

    errors.extend(_check_airport(criteria.departure_airport, 'departure_airport', "AKL, NZAA"))
    errors.extend(_check_airport(criteria.arrival_airport, 'arrival_airport', "CHC, NZCH"))

    if not is_blank(criteria.status) and FlightStatus.parse(criteria.status) is None:
        errors.append(FieldError(
            'status',
            f"Status must be one of: {FlightStatus.names()}."
        ))

    errors.extend(_check_dates(criteria, now))

    if criteria.is_empty:
        errors.append(FieldError(
            'search_criteria',
            "At least one search criterion must be provided."
        ))

    return ValidationResult(errors)


# =============================================================================
# Predicate
# =============================================================================

def build_predicate(criteria: SearchCriteria) -> Q:
    """
    Compose the populated criteria into one predicate over Flight.

    Call only after validate_search succeeded. A status that does not
    parse adds no clause.
    """
    predicate = Q()

    if not is_blank(criteria.airline):
        predicate &= Q(airline_key__contains=airline_search_key(criteria.airline))

    if not is_blank(criteria.departure_airport):
        predicate &= Q(departure_airport=criteria.departure_airport)

    if not is_blank(criteria.arrival_airport):
        predicate &= Q(arrival_airport=criteria.arrival_airport)

    if criteria.departure_from_date is not None:
        predicate &= Q(departure_time__gte=criteria.departure_from_date)

    if criteria.departure_to_date is not None:
        predicate &= Q(departure_time__lte=criteria.departure_to_date)

    if not is_blank(criteria.status):
        status = FlightStatus.parse(criteria.status)
        if status is not None:
            predicate &= Q(status=status)

    return predicate
