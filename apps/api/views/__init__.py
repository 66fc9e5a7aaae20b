"""
Flight Information API Views

REST API views for flight management.
"""

from .flight_views import FlightViewSet

__all__ = [
    'FlightViewSet',
]
