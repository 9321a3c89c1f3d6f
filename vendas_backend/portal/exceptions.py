# portal/exceptions.py

"""
PORTAL ERRORS

Two layers:
- PortalError / PortalUnavailableError: raised by the session client (plain Python)
- SessionVerificationUnavailable: the API-facing 500 raised by the DRF auth class
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class PortalError(Exception):
    """Base exception for failures talking to the session portal."""


class PortalUnavailableError(PortalError):
    """Raised when the portal cannot be reached or returns an unreadable body."""


class SessionVerificationUnavailable(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Failed to verify authentication"
    default_code = "portal_unavailable"
