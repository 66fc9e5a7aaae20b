"""
Flight Views

REST API views for flight record operations.
"""

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import FlightService
from apps.core.validation import SearchCriteria
from apps.api.serializers import (
    FlightSerializer,
    FlightCreateSerializer,
    FlightUpdateSerializer,
    FlightSearchSerializer,
)
from .base import BaseFlightViewSet, PaginationMixin, FilterMixin


class FlightViewSet(BaseFlightViewSet, PaginationMixin, FilterMixin):
    """
    ViewSet for flight operations.

    Provides CRUD operations and criteria search.
    """

    lookup_value_regex = r'\d+'

    # ==========================================================================
    # List and Retrieve
    # ==========================================================================

    def list(self, request):
        """
        List flights ordered by departure time.

        GET /api/v1/flights/
        """
        page, page_size = self.get_pagination_params()

        result = FlightService.list_flights(page=page, page_size=page_size)

        serializer = FlightSerializer(result['flights'], many=True)
        return Response({
            'results': serializer.data,
            'total': result['total'],
            'page': result['page'],
            'page_size': result['page_size'],
            'total_pages': result['total_pages'],
            'has_next': result['has_next'],
            'has_previous': result['has_previous'],
        })

    def retrieve(self, request, pk=None):
        """
        Retrieve a single flight.

        GET /api/v1/flights/{id}/
        """
        flight = FlightService.get_flight(flight_id=int(pk))
        return Response(FlightSerializer(flight).data)

    # ==========================================================================
    # Create, Update and Delete
    # ==========================================================================

    def create(self, request):
        """
        Create a new flight.

        POST /api/v1/flights/
        """
        serializer = FlightCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        flight = FlightService.create_flight(flight_data=serializer.validated_data)

        response_serializer = FlightSerializer(flight)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """
        Replace an existing flight.

        PUT /api/v1/flights/{id}/
        """
        serializer = FlightUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        flight = FlightService.update_flight(
            flight_id=int(pk),
            flight_data=serializer.validated_data,
        )

        return Response(FlightSerializer(flight).data)

    def destroy(self, request, pk=None):
        """
        Delete a flight.

        DELETE /api/v1/flights/{id}/
        """
        FlightService.delete_flight(flight_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ==========================================================================
    # Search
    # ==========================================================================

    @action(detail=False, methods=['get'])
    def search(self, request):
        """
        Search flights by airline, airports, departure window and status.

        GET /api/v1/flights/search/
        """
        filters = self.get_filters(FlightSearchSerializer)
        criteria = SearchCriteria.from_mapping(filters)

        flights = FlightService.search_flights(criteria)

        serializer = FlightSerializer(flights, many=True)
        return Response({
            'results': serializer.data,
            'total': len(flights),
        })
