# portal/services/session_client.py

"""
PORTAL SESSION CLIENT

Contract:
- POST {PORTAL_URL}/api/verify-session  body: {"sessionToken": "<token>"}
- Portal answers {"valid": bool, "session": {"username": ...}, "message": ...}

Outcomes:
- non-2xx from the portal      -> invalid session (expired / revoked)
- valid == false               -> invalid session, portal message kept
- valid == true                -> identity = session.username
- transport error / bad JSON   -> PortalUnavailableError (never retried)

No caching: callers verify on every request.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings

from portal.exceptions import PortalUnavailableError

logger = logging.getLogger(__name__)

VERIFY_PATH = "/api/verify-session"
DEFAULT_EXPIRED_MESSAGE = "Your session has expired"


@dataclass(frozen=True)
class SessionVerification:
    valid: bool
    identity: Optional[str] = None
    message: Optional[str] = None


def _portal_cfg() -> dict:
    cfg = getattr(settings, "PORTAL", None) or {}
    return cfg if isinstance(cfg, dict) else {}


def _portal_url() -> str:
    url = (_portal_cfg().get("URL") or "").strip().rstrip("/")
    if not url:
        raise PortalUnavailableError("PORTAL_URL is not configured.")
    return url


def _timeout() -> float:
    try:
        return float(_portal_cfg().get("TIMEOUT_SECONDS") or 10)
    except (TypeError, ValueError):
        return 10.0


def _post_json(url: str, body: dict, *, timeout: float) -> tuple[int, Any]:
    """
    Returns (http_status, parsed_json).
    HTTP error statuses are returned, not raised: the caller decides what they mean.
    """
    req = Request(
        url,
        data=json.dumps(body).encode("utf-8"),
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        method="POST",
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            http_status = resp.status
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        return e.code, None
    except (URLError, TimeoutError, OSError) as e:
        raise PortalUnavailableError(f"Portal unreachable: {e}") from e

    try:
        return http_status, json.loads(raw or "")
    except ValueError as e:
        raise PortalUnavailableError("Portal returned non-JSON response") from e


def verify_session(token: str) -> SessionVerification:
    token = (token or "").strip()
    if not token:
        return SessionVerification(valid=False, message="Session token not found")

    http_status, payload = _post_json(
        f"{_portal_url()}{VERIFY_PATH}",
        {"sessionToken": token},
        timeout=_timeout(),
    )

    if not 200 <= http_status < 300:
        logger.info("Portal rejected session", extra={"portal_status": http_status})
        return SessionVerification(valid=False, message=DEFAULT_EXPIRED_MESSAGE)

    if not isinstance(payload, dict):
        raise PortalUnavailableError("Portal returned an unexpected payload")

    if not payload.get("valid"):
        return SessionVerification(
            valid=False,
            message=payload.get("message") or DEFAULT_EXPIRED_MESSAGE,
        )

    session = payload.get("session") or {}
    username = session.get("username") if isinstance(session, dict) else None

    return SessionVerification(
        valid=True,
        identity=str(username).strip() if username else None,
        message=payload.get("message"),
    )
