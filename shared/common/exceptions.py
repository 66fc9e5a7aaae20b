"""
Project-wide DRF Exception Handler

Flight service errors are translated by the viewsets themselves. Everything
else reaching DRF ends up here and is wrapped in one envelope:

    {"success": false, "error": {"code", "message", "details", "request_id"}}
"""

import logging
import traceback
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'An unexpected error occurred. Please try again later.'


def error_envelope(
    code: str,
    message: str,
    request_id: Optional[str] = None,
    details: Any = None,
    **extra
) -> Dict[str, Any]:
    """Build the error body shared by every non-service failure."""
    error = {'code': code, 'message': message, 'request_id': request_id}
    if details:
        error['details'] = details
    error.update(extra)
    return {'success': False, 'error': error}


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Custom exception handler for DRF.

    DRF exceptions (including Http404, which DRF turns into NotFound) keep
    their status code. Django ValidationError becomes a 400. Anything else
    is logged and returned as a 500; the exception text and traceback are
    only exposed when DEBUG is on.
    """
    request = context.get('request')
    request_id = getattr(request, 'request_id', None)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = error_envelope(
            code=str(getattr(exc, 'default_code', 'error')).upper(),
            message=get_error_message(exc, response),
            request_id=request_id,
            details=field_errors(response),
        )
        return response

    if isinstance(exc, DjangoValidationError):
        details = exc.message_dict if hasattr(exc, 'error_dict') else {'detail': exc.messages}
        return Response(
            error_envelope('VALIDATION_ERROR', 'Validation error', request_id, details),
            status=status.HTTP_400_BAD_REQUEST
        )

    logger.exception(
        f"Unhandled exception: {exc}",
        extra={
            'request_id': request_id,
            'exception_type': type(exc).__name__,
        }
    )

    if settings.DEBUG:
        body = error_envelope(
            'INTERNAL_ERROR',
            str(exc),
            request_id,
            type=type(exc).__name__,
            traceback=traceback.format_exc().splitlines(),
        )
    else:
        body = error_envelope('INTERNAL_ERROR', GENERIC_ERROR_MESSAGE, request_id)

    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def field_errors(response: Response) -> Optional[Dict[str, Any]]:
    """Serializer errors keyed by field, if the response carries any."""
    if isinstance(response.data, dict) and 'detail' not in response.data:
        return response.data
    return None


def get_error_message(exc, response: Response) -> str:
    """Extract error message from exception or response"""
    detail = getattr(exc, 'detail', None)
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        return str(detail[0])
    if isinstance(detail, dict):
        return 'Invalid request data.'

    if isinstance(response.data, dict):
        return str(response.data.get('detail', response.data))
    return str(response.data)
