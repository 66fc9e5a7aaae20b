"""
Base Views and Mixins

Common functionality for Flight Information API views.
"""

from typing import Tuple

from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from apps.core.services.exceptions import (
    DuplicateFlightError,
    FlightNotFoundError,
    FlightServiceError,
)

# Checked in order; any other FlightServiceError is a 400.
SERVICE_ERROR_STATUS = (
    (FlightNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateFlightError, status.HTTP_409_CONFLICT),
)


def status_for(exc: FlightServiceError) -> int:
    for exc_class, code in SERVICE_ERROR_STATUS:
        if isinstance(exc, exc_class):
            return code
    return status.HTTP_400_BAD_REQUEST


class ExceptionHandlerMixin:
    """Mixin for handling service layer exceptions."""

    def handle_exception(self, exc):
        """Render service exceptions with their own body and status code."""
        if isinstance(exc, FlightServiceError):
            return Response(exc.to_dict(), status=status_for(exc))

        # Everything else goes through DRF and the project exception handler
        return super().handle_exception(exc)


class BaseFlightViewSet(ExceptionHandlerMixin, ViewSet):
    """
    Base ViewSet for the Flight Information API.

    Provides service exception translation.
    """


def _int_param(raw, default: int, low: int, high: int = None) -> int:
    try:
        value = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default
    value = max(low, value)
    return min(value, high) if high is not None else value


class PaginationMixin:
    """Mixin for page/page_size query parameters."""

    default_page_size = 20
    max_page_size = 100

    def get_pagination_params(self) -> Tuple[int, int]:
        """Read page and page_size, falling back to defaults on bad input."""
        params = self.request.query_params
        page = _int_param(params.get('page'), 1, low=1)
        page_size = _int_param(
            params.get('page_size'),
            self.default_page_size,
            low=1,
            high=self.max_page_size,
        )
        return page, page_size


class FilterMixin:
    """Mixin for filtering support."""

    def get_filters(self, filter_serializer_class):
        """
        Extract and type-check filters from the query string.

        Args:
            filter_serializer_class: Serializer class for filter parsing

        Returns:
            Dictionary of parsed filters
        """
        serializer = filter_serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return {k: v for k, v in serializer.validated_data.items() if v is not None}
