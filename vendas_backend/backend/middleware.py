# backend/middleware.py

"""
REQUEST LOG

One line per request: method, path, status, duration.
Session tokens are never logged.
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger("vendas.requests")


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = int((time.monotonic() - started) * 1000)

        logger.info(
            "%s %s -> %s (%sms)",
            request.method,
            request.path,
            response.status_code,
            elapsed_ms,
        )
        return response
