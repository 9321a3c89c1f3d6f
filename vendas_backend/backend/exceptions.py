# backend/exceptions.py

"""
PATH: backend/exceptions.py

API ERROR BODIES (DRF EXCEPTION_HANDLER)

Shapes the dashboard relies on:
- 401 (missing / invalid session)  -> {"error": ..., "message": ...}
- 500 (store or portal failure)    -> {"error": ..., "details": ...} / {"error", "message"}
- any other DRF error              -> {"error": ..., "message": ...}

Django 404s for unknown routes are rendered by `not_found`.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from django.http import JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from portal.exceptions import SessionVerificationUnavailable
from sales.services.exceptions import LedgerSyncError

logger = logging.getLogger(__name__)


def _message_from(data) -> str:
    if isinstance(data, dict):
        detail = data.get("detail")
        if detail is not None:
            return str(detail)
        return "; ".join(
            f"{field}: {' '.join(str(e) for e in errors) if isinstance(errors, list) else errors}"
            for field, errors in data.items()
        )
    if isinstance(data, list):
        return " ".join(str(e) for e in data)
    return str(data)


def api_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, LedgerSyncError):
        logger.error("Ledger sync failed", extra={"view": view_name, "error": str(exc)})
        return Response(
            {"error": "Ledger sync failed", "details": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DatabaseError):
        logger.exception("Database error", extra={"view": view_name})
        return Response(
            {"error": "Database error", "details": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {
            "error": "Not authenticated",
            "message": "Session token not found",
        }
    elif isinstance(exc, exceptions.AuthenticationFailed):
        response.data = {
            "error": "Invalid session",
            "message": _message_from(response.data),
        }
    elif isinstance(exc, SessionVerificationUnavailable):
        response.data = {
            "error": "Internal error",
            "message": _message_from(response.data),
        }
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error": "Invalid request",
            "message": _message_from(response.data),
        }
    else:
        response.data = {
            "error": exc.__class__.__name__,
            "message": _message_from(response.data),
        }

    return response


def route_not_found_body(request) -> dict:
    return {"error": "404 - Route not found", "path": request.path}


def not_found(request, exception=None):
    return JsonResponse(route_not_found_body(request), status=404)
