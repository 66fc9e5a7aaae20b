"""
Flight Service Exceptions

Custom exceptions for flight service operations.
"""

from typing import Optional, Dict, Any, List


class FlightServiceError(Exception):
    """Base exception for flight service errors."""

    def __init__(
        self,
        message: str,
        code: str = "FLIGHT_SERVICE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class FlightNotFoundError(FlightServiceError):
    """Raised when a flight is not found."""

    def __init__(
        self,
        flight_id: Any = None,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Flight with ID {flight_id} not found."
        super().__init__(
            message=msg,
            code="FLIGHT_NOT_FOUND",
            details=details or {"flight_id": flight_id}
        )


class FlightValidationError(FlightServiceError):
    """
    Raised when flight data fails one or more business rules.

    ``errors`` maps each offending field to its messages, in the order the
    rules reported them.
    """

    def __init__(
        self,
        message: str = "Validation failed.",
        errors: Optional[Dict[str, List[str]]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.errors = errors or {}
        error_details = details or {}
        if self.errors:
            error_details["errors"] = self.errors
        super().__init__(
            message=message,
            code="FLIGHT_VALIDATION_ERROR",
            details=error_details
        )


class DuplicateFlightError(FlightServiceError):
    """Raised when a flight number is already taken by another record."""

    def __init__(
        self,
        flight_number: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Flight number {flight_number} already exists."
        error_details = details or {}
        error_details["flight_number"] = flight_number
        super().__init__(
            message=msg,
            code="DUPLICATE_FLIGHT",
            details=error_details
        )
