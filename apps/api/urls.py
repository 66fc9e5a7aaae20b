"""
Flight Information API URL Configuration

Defines URL patterns for all flight endpoints.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.views import FlightViewSet

app_name = 'api'

router = DefaultRouter()
router.register(r'flights', FlightViewSet, basename='flight')

urlpatterns = [
    path('', include(router.urls)),
]

# =============================================================================
# API Endpoint Summary
# =============================================================================
#
#   GET    /api/v1/flights/            - List flights (by departure time)
#   POST   /api/v1/flights/            - Create flight
#   GET    /api/v1/flights/{id}/       - Get flight
#   PUT    /api/v1/flights/{id}/       - Replace flight
#   DELETE /api/v1/flights/{id}/       - Delete flight
#   GET    /api/v1/flights/search/     - Search by criteria
#
# =============================================================================
