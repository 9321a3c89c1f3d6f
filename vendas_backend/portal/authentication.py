# portal/authentication.py

"""
PATH: portal/authentication.py

DRF AUTHENTICATION: X-Session-Token verified by the external portal

Rules:
- Header missing/blank -> no credentials (DRF answers 401 NotAuthenticated);
  the portal is NOT called.
- Portal says invalid -> AuthenticationFailed (401) with the portal's message.
- Portal unreachable -> SessionVerificationUnavailable (500), not retried.
- Portal says valid -> request.user is a PortalUser for this request only.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication

from portal.exceptions import PortalUnavailableError, SessionVerificationUnavailable
from portal.services.session_client import verify_session

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Token"


class PortalUser:
    """
    Request-scoped identity handed out by the portal.
    Not a Django user: nothing about it is persisted.
    """

    is_authenticated = True
    is_anonymous = False
    is_active = True

    def __init__(self, username: str):
        self.username = username

    def __str__(self) -> str:
        return self.username

    def __repr__(self) -> str:
        return f"PortalUser({self.username!r})"


class PortalSessionAuthentication(BaseAuthentication):
    header = SESSION_HEADER

    def authenticate(self, request):
        token = (request.headers.get(self.header) or "").strip()
        if not token:
            return None

        try:
            result = verify_session(token)
        except PortalUnavailableError as exc:
            logger.error("Session verification failed", extra={"error": str(exc)})
            raise SessionVerificationUnavailable() from exc

        if not result.valid:
            raise exceptions.AuthenticationFailed(result.message)

        if not result.identity:
            raise exceptions.AuthenticationFailed("Session has no username")

        return PortalUser(result.identity), token

    def authenticate_header(self, request):
        return 'Session header="X-Session-Token"'
