"""
Field formats shared by the flight and search rule sets.
"""

import re
from datetime import datetime, timezone as dt_timezone
from typing import Any

from django.utils import timezone

FLIGHT_NUMBER_PATTERN = re.compile(r'^[A-Z]{2}[0-9]{1,4}$')
AIRPORT_CODE_PATTERN = re.compile(r'^[A-Z]{3,4}$')

FLIGHT_NUMBER_LENGTH = (2, 10)
AIRLINE_LENGTH = (2, 100)
AIRPORT_CODE_LENGTH = (3, 5)


def is_blank(value: Any) -> bool:
    """True for None and for strings holding only whitespace."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def length_between(value: str, bounds) -> bool:
    low, high = bounds
    return low <= len(value) <= high


def is_flight_number(value: str) -> bool:
    return FLIGHT_NUMBER_PATTERN.fullmatch(value) is not None


def is_airport_code(value: str) -> bool:
    return AIRPORT_CODE_PATTERN.fullmatch(value) is not None


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if timezone.is_naive(value):
        return timezone.make_aware(value, dt_timezone.utc)
    return value
