"""
Flight Information Service URL Configuration
"""

from django.contrib import admin
from django.urls import path, include

from shared.common.health import get_health_urlpatterns
from shared.common.openapi import get_api_docs_urlpatterns


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('apps.api.urls', namespace='api')),
]

urlpatterns += get_health_urlpatterns()
urlpatterns += get_api_docs_urlpatterns()
