"""
Health Check Module.

Liveness and readiness probes. Readiness fails with 503 while any
dependency check reports unhealthy; the only dependency is the database
holding the flight records.
"""
import logging
import time
from typing import Any, Callable, Dict, List

from django.conf import settings
from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class HealthStatus:
    """Health check status constants."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


def check_database() -> Dict[str, Any]:
    """Round-trip a trivial query and report its latency."""
    started = time.monotonic()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return {"name": "database", "status": HealthStatus.UNHEALTHY, "error": str(e)}

    return {
        "name": "database",
        "status": HealthStatus.HEALTHY,
        "latency_ms": round((time.monotonic() - started) * 1000, 2),
    }


READINESS_CHECKS: List[Callable[[], Dict[str, Any]]] = [
    check_database,
]


# =============================================================================
# HEALTH CHECK VIEWS
# =============================================================================

@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """The process is up; no dependencies are touched."""
    return Response({
        "status": HealthStatus.HEALTHY,
        "service": getattr(settings, 'SERVICE_NAME', 'unknown'),
        "timestamp": timezone.now().isoformat(),
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def liveness_check(request):
    return Response({"status": "alive", "timestamp": timezone.now().isoformat()})


@api_view(['GET'])
@permission_classes([AllowAny])
def readiness_check(request):
    """Run every readiness check; 503 if any of them fails."""
    checks = [check() for check in READINESS_CHECKS]
    ready = all(c["status"] == HealthStatus.HEALTHY for c in checks)

    return Response(
        {
            "status": HealthStatus.HEALTHY if ready else HealthStatus.UNHEALTHY,
            "checks": checks,
            "timestamp": timezone.now().isoformat(),
        },
        status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE
    )


def get_health_urlpatterns():
    """
    URL patterns for the probes.

    Usage in urls.py:
        urlpatterns += get_health_urlpatterns()
    """
    from django.urls import path

    return [
        path('health/', health_check, name='health'),
        path('health/live/', liveness_check, name='liveness'),
        path('health/ready/', readiness_check, name='readiness'),
    ]
