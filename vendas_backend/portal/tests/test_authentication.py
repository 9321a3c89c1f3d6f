# portal/tests/test_authentication.py

from unittest.mock import patch

from django.test import TestCase
from rest_framework.test import APIClient

from portal.exceptions import PortalUnavailableError
from portal.services.session_client import SessionVerification


class PortalSessionAuthenticationTests(TestCase):
    """
    Auth flow through /api/status.

    GUARANTEES:
    - No header -> 401, portal never called
    - Portal rejection -> 401 with the portal's message
    - Portal down -> 500, not retried
    - Valid session -> identity exposed as request.user
    """

    def setUp(self):
        self.client = APIClient()

    @patch("portal.authentication.verify_session")
    def test_missing_token_is_rejected_without_calling_portal(self, verify):
        res = self.client.get("/api/status")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(
            res.json(),
            {"error": "Not authenticated", "message": "Session token not found"},
        )
        verify.assert_not_called()

    @patch("portal.authentication.verify_session")
    def test_blank_token_is_treated_as_missing(self, verify):
        res = self.client.get("/api/status", HTTP_X_SESSION_TOKEN="   ")

        self.assertEqual(res.status_code, 401)
        verify.assert_not_called()

    @patch("portal.authentication.verify_session")
    def test_invalid_session(self, verify):
        verify.return_value = SessionVerification(valid=False, message="Sessão expirada")

        res = self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(
            res.json(), {"error": "Invalid session", "message": "Sessão expirada"}
        )

    @patch("portal.authentication.verify_session")
    def test_valid_session_without_username_is_rejected(self, verify):
        verify.return_value = SessionVerification(valid=True, identity=None)

        res = self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["error"], "Invalid session")

    @patch("portal.authentication.verify_session")
    def test_portal_unavailable_is_internal_error(self, verify):
        verify.side_effect = PortalUnavailableError("timeout")

        res = self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")

        self.assertEqual(res.status_code, 500)
        self.assertEqual(
            res.json(),
            {"error": "Internal error", "message": "Failed to verify authentication"},
        )
        self.assertEqual(verify.call_count, 1)

    @patch("portal.authentication.verify_session")
    def test_valid_session_reports_user(self, verify):
        verify.return_value = SessionVerification(valid=True, identity="vendas")

        res = self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["status"], "online")
        self.assertEqual(body["user"], "vendas")
        self.assertIn("timestamp", body)
        verify.assert_called_once_with("tok")

    @patch("portal.authentication.verify_session")
    def test_every_request_is_verified(self, verify):
        verify.return_value = SessionVerification(valid=True, identity="vendas")

        self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")
        self.client.get("/api/status", HTTP_X_SESSION_TOKEN="tok")

        self.assertEqual(verify.call_count, 2)
