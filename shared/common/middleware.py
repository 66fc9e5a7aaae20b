"""
Request Tracing and Logging Middleware
"""

import uuid
import time
import logging
from typing import Callable

from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'X-Request-ID'
RESPONSE_TIME_HEADER = 'X-Response-Time'


class RequestIDMiddleware:
    """
    Tags each request with an ID, taken from the X-Request-ID header when
    the caller sends one, and echoes it on the response.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        response = self.get_response(request)
        response[REQUEST_ID_HEADER] = request.request_id
        return response


class LoggingMiddleware:
    """
    Logs the start and outcome of every request except health probes.

    Responses with a 4xx/5xx status are logged at WARNING.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.path.startswith('/health/'):
            return self.get_response(request)

        request_id = getattr(request, 'request_id', None)
        logger.info(
            f"Request started: {request.method} {request.path}",
            extra={
                'request_id': request_id,
                'ip_address': client_ip(request),
            }
        )

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - started) * 1000

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"Request completed: {request.method} {request.path} - {response.status_code}",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'duration_ms': round(duration_ms, 2),
            }
        )

        response[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"
        return response


def client_ip(request: HttpRequest) -> str:
    """First hop of X-Forwarded-For, else the socket peer."""
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '')
