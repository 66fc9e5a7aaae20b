"""
Flight Validation Rules

Business rules applied to a flight payload on create and update. Every
rule runs on every pass and reports its own FieldError values, so callers
get the full list of problems at once.

A payload is a mapping with the keys flight_number, airline,
departure_airport, arrival_airport, departure_time, arrival_time and
status. Times are datetimes; naive values are read as UTC.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, List, Mapping, Optional

from django.conf import settings
from django.utils import timezone

from apps.core.models import FlightStatus
from .formats import (
    AIRLINE_LENGTH,
    AIRPORT_CODE_LENGTH,
    FLIGHT_NUMBER_LENGTH,
    as_utc,
    is_airport_code,
    is_blank,
    is_flight_number,
    length_between,
)
from .results import FieldError, ValidationResult

Payload = Mapping[str, Any]
Rule = Callable[[Payload], List[FieldError]]

DEFAULT_CREATE_GRACE_MINUTES = 30


# =============================================================================
# Field rules
# =============================================================================

def check_flight_number(payload: Payload) -> List[FieldError]:
    value = payload.get('flight_number')
    if is_blank(value):
        return [FieldError('flight_number', "Flight number is required.")]

    errors = []
    if not length_between(value, FLIGHT_NUMBER_LENGTH):
        errors.append(FieldError(
            'flight_number',
            "Flight number must be between 2 and 10 characters."
        ))
    if not is_flight_number(value):
        errors.append(FieldError(
            'flight_number',
            "Flight number must be in format: AA123 "
            "(2 letters followed by 1-4 numbers)."
        ))
    return errors


def check_airline(payload: Payload) -> List[FieldError]:
    value = payload.get('airline')
    if is_blank(value):
        return [FieldError('airline', "Airline is required.")]
    if not length_between(value, AIRLINE_LENGTH):
        return [FieldError('airline', "Airline must be between 2 and 100 characters.")]
    return []


def _check_airport(payload: Payload, field_name: str, label: str) -> List[FieldError]:
    value = payload.get(field_name)
    if is_blank(value):
        return [FieldError(field_name, f"{label} airport is required.")]

    errors = []
    if not length_between(value, AIRPORT_CODE_LENGTH):
        errors.append(FieldError(
            field_name,
            f"{label} airport must be between 3 and 5 characters."
        ))
    if not is_airport_code(value):
        errors.append(FieldError(field_name, "Airport code must be 3-4 uppercase letters."))
    return errors


def check_departure_airport(payload: Payload) -> List[FieldError]:
    return _check_airport(payload, 'departure_airport', "Departure")


def check_arrival_airport(payload: Payload) -> List[FieldError]:
    return _check_airport(payload, 'arrival_airport', "Arrival")


def check_departure_time(
    payload: Payload,
    earliest: Optional[datetime] = None,
    grace_minutes: int = DEFAULT_CREATE_GRACE_MINUTES
) -> List[FieldError]:
    """Departure is required; when ``earliest`` is given it is a lower bound."""
    value = payload.get('departure_time')
    if value is None:
        return [FieldError('departure_time', "Departure time is required.")]
    if earliest is not None and as_utc(value) < earliest:
        return [FieldError(
            'departure_time',
            f"Departure time cannot be more than {grace_minutes} minutes in the past."
        )]
    return []


def check_arrival_time(payload: Payload) -> List[FieldError]:
    if payload.get('arrival_time') is None:
        return [FieldError('arrival_time', "Arrival time is required.")]
    return []


def check_status(payload: Payload) -> List[FieldError]:
    value = payload.get('status')
    if is_blank(value):
        return [FieldError('status', "Status is required.")]
    if FlightStatus.parse(value) is None:
        return [FieldError('status', f"Status must be one of: {FlightStatus.names()}.")]
    return []


# =============================================================================
# Cross-field rules
# =============================================================================

def check_arrival_after_departure(payload: Payload) -> List[FieldError]:
    departure = payload.get('departure_time')
    arrival = payload.get('arrival_time')
    if departure is None or arrival is None:
        return []
    if as_utc(arrival) <= as_utc(departure):
        return [FieldError('arrival_time', "Arrival time must be after departure time.")]
    return []


def check_airports_differ(payload: Payload) -> List[FieldError]:
    departure = payload.get('departure_airport')
    arrival = payload.get('arrival_airport')
    if is_blank(departure) or is_blank(arrival):
        return []
    if departure == arrival:
        return [FieldError(
            'arrival_airport',
            "Departure and arrival airports cannot be the same."
        )]
    return []


# =============================================================================
# Entry points
# =============================================================================

def _run(payload: Payload, departure_rule: Rule) -> ValidationResult:
    rules: List[Rule] = [
        check_flight_number,
        check_airline,
        check_departure_airport,
        check_arrival_airport,
        departure_rule,
        check_arrival_time,
        check_arrival_after_departure,
        check_status,
        check_airports_differ,
    ]
    errors: List[FieldError] = []
    for rule in rules:
        errors.extend(rule(payload))
    return ValidationResult(errors)


def create_grace_minutes() -> int:
    return getattr(
        settings, 'FLIGHT_CREATE_GRACE_MINUTES', DEFAULT_CREATE_GRACE_MINUTES
    )


def validate_create(payload: Payload, now: Optional[datetime] = None) -> ValidationResult:
    """
    Validate a payload for a new flight.

    On top of the shared rules, departure may be at most the grace
    period (FLIGHT_CREATE_GRACE_MINUTES, 30 by default) before ``now``.

    Args:
        payload: Flight field mapping
        now: Reference time, defaults to the current UTC time

    Returns:
        ValidationResult with every violated rule
    """
    grace_minutes = create_grace_minutes()
    earliest = as_utc(now or timezone.now()) - timedelta(minutes=grace_minutes)
    return _run(
        payload,
        lambda p: check_departure_time(p, earliest, grace_minutes)
    )


def validate_update(payload: Payload) -> ValidationResult:
    """
    Validate a full-replace payload for an existing flight.

    Same rules as create, except departure time has no lower bound.
    """
    return _run(payload, check_departure_time)
