# backend/urls.py
"""
PROJECT URLS

Public (no session token):
- GET /        -> service status
- GET /health  -> store reachability

Everything under /api/ requires X-Session-Token (verified by the portal):
- sales ledger, deliveries, settled receivables, dashboard, sync triggers
- /api/status  -> authenticated connectivity probe used by the dashboard
- /api/schema, /api/docs -> OpenAPI
- any other /api/ path -> 401 without a session, JSON 404 with one

Security hardening:
- Django admin path configurable via ADMIN_PATH.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.db import DatabaseError
from django.urls import include, path, re_path
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
)
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.exceptions import route_not_found_body
from sales.models import Sale


def _service_name() -> str:
    return getattr(settings, "SERVICE_NAME", "Vendas API")


# ------------------ ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "service": {"type": "string"},
                "version": {"type": "string"},
                "timestamp": {"type": "string"},
            },
        }
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def service_root(request):
    return Response(
        {
            "status": "online",
            "service": _service_name(),
            "version": getattr(settings, "SERVICE_VERSION", "1.0.0"),
            "timestamp": timezone.now().isoformat(),
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "database": {"type": "string"},
                "timestamp": {"type": "string"},
                "service": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "database": {"type": "string"},
                "error": {"type": "string"},
                "timestamp": {"type": "string"},
                "service": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Store reachability:
    - Confirms app is responding
    - Confirms the sales ledger table can be queried
    """
    payload = {
        "timestamp": timezone.now().isoformat(),
        "service": _service_name(),
    }
    try:
        Sale.objects.exists()
    except DatabaseError as e:
        payload.update(
            {"status": "unhealthy", "database": "disconnected", "error": str(e)}
        )
        return Response(payload, status=503)

    payload.update({"status": "healthy", "database": "connected"})
    return Response(payload)


# ------------------ STATUS (AUTHENTICATED) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "user": {"type": "string"},
                "timestamp": {"type": "string"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def api_status(request):
    return Response(
        {
            "status": "online",
            "user": getattr(request.user, "username", None),
            "timestamp": timezone.now().isoformat(),
        }
    )


# ------------------ UNKNOWN /api/ ROUTES (AUTHENTICATED) ------------------
# Session check runs before routing: no token -> 401, valid token -> JSON 404.
@extend_schema(exclude=True)
@api_view(["GET", "POST", "PUT", "PATCH", "DELETE"])
@permission_classes([IsAuthenticated])
def api_route_not_found(request, *args, **kwargs):
    return Response(route_not_found_body(request), status=404)


# ------------------ ADMIN PATH (HARDENED) ------------------
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    path("status", api_status, name="api-status"),
    # OpenAPI / Swagger
    path("schema", SpectacularAPIView.as_view(), name="schema"),
    path("docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Sales ledger + sync
    path("", include("sales.api.urls")),
    # Must stay last
    re_path(r"^.*$", api_route_not_found, name="api-not-found"),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("", service_root, name="root"),
    path("health", health_check, name="health-check"),
    path("api/", include(api_urlpatterns)),
]

handler404 = "backend.exceptions.not_found"
