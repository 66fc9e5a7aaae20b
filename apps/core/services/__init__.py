"""
Flight Service - Service Layer

Business logic layer for flight record operations.
"""

from .exceptions import (
    FlightServiceError,
    FlightNotFoundError,
    FlightValidationError,
    DuplicateFlightError,
)

from .flight_service import FlightService

__all__ = [
    # Exceptions
    'FlightServiceError',
    'FlightNotFoundError',
    'FlightValidationError',
    'DuplicateFlightError',
    # Services
    'FlightService',
]
