"""
Flight Service

Business logic for flight record management: validation, persistence
and search.
"""

import logging
from datetime import datetime
from typing import List, Dict, Any, Optional

from django.core.paginator import Paginator
from django.db import IntegrityError, transaction

from ..models import Flight, FlightStatus
from ..validation import (
    SearchCriteria,
    ValidationResult,
    build_predicate,
    validate_create,
    validate_search,
    validate_update,
)
from .exceptions import (
    DuplicateFlightError,
    FlightNotFoundError,
    FlightValidationError,
)

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = (
    'flight_number',
    'airline',
    'departure_airport',
    'arrival_airport',
    'departure_time',
    'arrival_time',
    'status',
)


class FlightService:
    """
    Service class for flight record operations.

    Runs the validation rules before anything reaches the database and
    keeps all ORM access in one place.
    """

    # ==========================================================================
    # Flight CRUD Operations
    # ==========================================================================

    @classmethod
    def list_flights(
        cls,
        page: int = 1,
        page_size: int = 20,
    ) -> Dict[str, Any]:
        """
        List flights ordered by departure time, with pagination.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            Dictionary with flights and pagination info
        """
        logger.info("Retrieving all flights")

        queryset = Flight.objects.by_departure()
        paginator = Paginator(queryset, page_size)
        page_obj = paginator.get_page(page)

        logger.info(f"Retrieved {paginator.count} flights")

        return {
            'flights': list(page_obj.object_list),
            'total': paginator.count,
            'page': page_obj.number,
            'page_size': page_size,
            'total_pages': paginator.num_pages,
            'has_next': page_obj.has_next(),
            'has_previous': page_obj.has_previous(),
        }

    @classmethod
    def get_flight(cls, flight_id: int) -> Flight:
        """
        Get a flight by ID.

        Raises:
            FlightNotFoundError: If flight not found
        """
        try:
            return Flight.objects.get(id=flight_id)
        except Flight.DoesNotExist:
            logger.warning(f"Flight {flight_id} not found")
            raise FlightNotFoundError(flight_id=flight_id)

    @classmethod
    def flight_exists(cls, flight_id: int) -> bool:
        return Flight.objects.filter(id=flight_id).exists()

    @classmethod
    @transaction.atomic
    def create_flight(
        cls,
        flight_data: Dict[str, Any],
        now: Optional[datetime] = None,
    ) -> Flight:
        """
        Create a new flight.

        Args:
            flight_data: Flight field mapping
            now: Reference time for the departure grace window

        Returns:
            Created Flight instance

        Raises:
            FlightValidationError: If any business rule fails
            DuplicateFlightError: If the flight number is taken
        """
        logger.info(
            f"Creating new flight {flight_data.get('flight_number')} from "
            f"{flight_data.get('departure_airport')} to {flight_data.get('arrival_airport')}"
        )

        cls._raise_if_invalid(validate_create(flight_data, now=now))

        fields = cls._model_fields(flight_data)
        cls._ensure_unique_number(fields['flight_number'])

        try:
            flight = Flight.objects.create(**fields)
        except IntegrityError:
            raise DuplicateFlightError(flight_number=fields['flight_number'])

        logger.info(f"Flight created successfully with ID {flight.id}: {flight.flight_number}")
        return flight

    @classmethod
    @transaction.atomic
    def update_flight(
        cls,
        flight_id: int,
        flight_data: Dict[str, Any],
    ) -> Flight:
        """
        Replace the mutable fields of an existing flight.

        Args:
            flight_id: Flight ID
            flight_data: Complete flight field mapping

        Returns:
            Updated Flight instance

        Raises:
            FlightNotFoundError: If flight not found
            FlightValidationError: If any business rule fails
            DuplicateFlightError: If the new flight number is taken
        """
        logger.info(f"Updating flight {flight_id}")

        flight = cls.get_flight(flight_id)
        cls._raise_if_invalid(validate_update(flight_data))

        fields = cls._model_fields(flight_data)
        cls._ensure_unique_number(fields['flight_number'], exclude_id=flight.id)

        for key, value in fields.items():
            setattr(flight, key, value)

        try:
            flight.save()
        except IntegrityError:
            raise DuplicateFlightError(flight_number=fields['flight_number'])

        logger.info(f"Flight {flight.id} updated successfully")
        return flight

    @classmethod
    @transaction.atomic
    def delete_flight(cls, flight_id: int) -> bool:
        """
        Delete a flight.

        Returns:
            True if deleted

        Raises:
            FlightNotFoundError: If flight not found
        """
        flight = cls.get_flight(flight_id)
        flight.delete()

        logger.info(f"Flight {flight_id} deleted")
        return True

    # ==========================================================================
    # Search
    # ==========================================================================

    @classmethod
    def search_flights(
        cls,
        criteria: SearchCriteria,
        now: Optional[datetime] = None,
    ) -> List[Flight]:
        """
        Find flights matching the given criteria, ordered by departure.

        Raises:
            FlightValidationError: If the criteria are invalid
        """
        logger.info(f"Searching flights by {', '.join(criteria.populated()) or 'nothing'}")

        cls._raise_if_invalid(
            validate_search(criteria, now=now),
            message="Invalid search criteria."
        )

        flights = list(Flight.objects.matching(build_predicate(criteria)))

        logger.info(f"Search returned {len(flights)} flights")
        return flights

    # ==========================================================================
    # Helper Methods
    # ==========================================================================

    @classmethod
    def _raise_if_invalid(
        cls,
        result: ValidationResult,
        message: str = "Validation failed."
    ) -> None:
        """Raise FlightValidationError carrying every collected error."""
        if not result:
            logger.info(f"Validation failed on {', '.join(result.as_dict())}")
            raise FlightValidationError(message=message, errors=result.as_dict())

    @classmethod
    def _model_fields(cls, flight_data: Dict[str, Any]) -> Dict[str, Any]:
        """Pick the persisted fields and store status by its canonical name."""
        fields = {key: flight_data[key] for key in MUTABLE_FIELDS}
        fields['status'] = FlightStatus.parse(fields['status'])
        return fields

    @classmethod
    def _ensure_unique_number(cls, flight_number: str, exclude_id: int = None) -> None:
        queryset = Flight.objects.filter(flight_number=flight_number)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        if queryset.exists():
            logger.warning(f"Flight number {flight_number} already exists")
            raise DuplicateFlightError(flight_number=flight_number)
