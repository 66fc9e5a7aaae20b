"""
OpenAPI/Swagger Configuration Module.

Schema generation and interactive docs via drf-spectacular. Settings import
this module, so drf-spectacular itself is only imported once URLs load.
"""
from typing import Dict, Any, List

HEALTH_PATHS = ('/health/', '/health/live/', '/health/ready/')


def get_spectacular_settings(
    title: str,
    description: str,
    version: str = "1.0.0",
) -> Dict[str, Any]:
    """
    Build the SPECTACULAR_SETTINGS dictionary.

    Args:
        title: Human readable API title
        description: Markdown description shown in the docs
        version: API version
    """
    return {
        'TITLE': title,
        'DESCRIPTION': description,
        'VERSION': version,
        'SERVE_INCLUDE_SCHEMA': False,
        'TAGS': [
            {'name': 'flights', 'description': 'Flight records and search'},
        ],
        'COMPONENT_SPLIT_REQUEST': True,
        'PREPROCESSING_HOOKS': [
            'shared.common.openapi.preprocess_exclude_health',
        ],
        'SCHEMA_PATH_PREFIX': r'/api/v[0-9]+/',
        'SWAGGER_UI_SETTINGS': {
            'deepLinking': True,
            'filter': True,
        },
        'SORT_OPERATIONS': True,
    }


def preprocess_exclude_health(endpoints: List, **kwargs) -> List:
    """Drop the health probes from the generated schema."""
    return [
        (path, path_regex, method, callback)
        for path, path_regex, method, callback in endpoints
        if not path.endswith(HEALTH_PATHS)
    ]


def get_api_docs_urlpatterns():
    """
    Schema, Swagger UI and ReDoc routes.

    Usage in urls.py:
        urlpatterns += get_api_docs_urlpatterns()
    """
    from django.urls import path
    from drf_spectacular.views import (
        SpectacularAPIView,
        SpectacularRedocView,
        SpectacularSwaggerView,
    )

    return [
        path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
        path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
        path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    ]


FLIGHT_INFORMATION_OPENAPI = get_spectacular_settings(
    title="Flight Information API",
    description=(
        "Stores scheduled flights and lets clients create, replace, delete "
        "and search them by airline, route, departure window and status."
    ),
)
