# sales/tests/test_api.py

from datetime import date
from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from portal.services.session_client import SessionVerification
from sales.models import Delivery, Receivable, Sale
from sales.services.exceptions import LedgerSyncError
from sales.tests.factories import make_delivery, make_receivable, make_sale


class AuthenticatedAPITestCase(TestCase):
    """
    Base: every request carries X-Session-Token and the portal answer is mocked.
    """

    identity = "roberto"

    def setUp(self):
        patcher = patch("portal.authentication.verify_session")
        self.verify = patcher.start()
        self.addCleanup(patcher.stop)
        self.login_as(self.identity)

        self.client = APIClient()
        self.client.credentials(HTTP_X_SESSION_TOKEN="tok-abc")

    def login_as(self, identity):
        self.verify.return_value = SessionVerification(valid=True, identity=identity)


class LedgerListTests(AuthenticatedAPITestCase):
    """
    GUARANTEES:
    - Admins see every seller, sellers only their own rows
    - ?vendedor= narrows, never widens
    - Lists are not paginated
    """

    def setUp(self):
        super().setUp()
        make_sale("1", vendedor="MIGUEL", data_entrega=date(2024, 1, 5))
        make_sale("2", vendedor="ISAQUE", data_entrega=date(2024, 2, 5), nome_orgao="Hospital Regional")
        make_sale("3", vendedor="MIGUEL", data_entrega=date(2024, 3, 5), status_pagamento=True)

    def _nfs(self, res):
        self.assertEqual(res.status_code, 200, res.content)
        return [row["numero_nf"] for row in res.json()]

    def test_requires_session(self):
        with self.assertNumQueries(0):
            res = APIClient().get("/api/vendas")

        self.assertEqual(res.status_code, 401)
        self.verify.assert_not_called()

    def test_admin_sees_all(self):
        self.assertEqual(self._nfs(self.client.get("/api/vendas")), ["3", "2", "1"])

    def test_aliased_seller_sees_own(self):
        self.login_as("vendas2")

        self.assertEqual(self._nfs(self.client.get("/api/vendas")), ["3", "1"])

    def test_unlisted_identity_sees_own_name_only(self):
        self.login_as("isaque")

        self.assertEqual(self._nfs(self.client.get("/api/vendas")), ["2"])

    def test_admin_vendedor_override(self):
        res = self.client.get("/api/vendas", {"vendedor": "MIGUEL"})

        self.assertEqual(self._nfs(res), ["3", "1"])

    def test_seller_cannot_widen_with_override(self):
        self.login_as("vendas")

        res = self.client.get("/api/vendas", {"vendedor": "MIGUEL"})

        self.assertEqual(self._nfs(res), [])

    def test_month_and_search_filters(self):
        self.assertEqual(self._nfs(self.client.get("/api/vendas", {"mes": 2})), ["2"])
        self.assertEqual(
            self._nfs(self.client.get("/api/vendas", {"busca": "regional"})), ["2"]
        )
        self.assertEqual(
            self._nfs(self.client.get("/api/vendas", {"status_pagamento": "true"})),
            ["3"],
        )

    def test_invalid_month_is_rejected(self):
        res = self.client.get("/api/vendas", {"mes": 13})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid request")

    def test_entregas(self):
        make_delivery("10", vendedor="MIGUEL", status=Delivery.STATUS_PENDING)
        make_delivery("11", vendedor="ISAQUE")
        self.login_as("vendas2")

        res = self.client.get("/api/entregas")

        self.assertEqual(self._nfs(res), ["10"])
        self.assertEqual(res.json()[0]["status"], Delivery.STATUS_PENDING)

    def test_liquidadas_only_paid(self):
        make_receivable("10", status=Receivable.STATUS_PAID, data_pagamento=date(2024, 5, 1))
        make_receivable("11", status=Receivable.STATUS_PENDING)

        res = self.client.get("/api/liquidadas", {"vendedor": "MIGUEL"})

        self.assertEqual(self._nfs(res), ["10"])


class PaidDashboardTests(AuthenticatedAPITestCase):
    def setUp(self):
        super().setUp()
        make_receivable(
            "1", valor=Decimal("200.00"), status=Receivable.STATUS_PAID,
            data_pagamento=date(2024, 7, 9),
        )

    def test_painel_for_year(self):
        res = self.client.get("/api/painel", {"ano": 2024})

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["ano"], 2024)
        self.assertEqual(body["meses"][6], {"mes": 7, "nome": "Julho", "total": "200.00"})
        self.assertEqual(body["total"], "200.00")

    def test_painel_invalid_year(self):
        res = self.client.get("/api/painel", {"ano": "abc"})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid year")


class SyncEndpointTests(AuthenticatedAPITestCase):
    def test_sync_entregas_then_again(self):
        make_delivery("100")
        make_receivable("100", status=Receivable.STATUS_PAID, data_pagamento=date(2024, 2, 1))

        first = self.client.get("/api/sync-entregas")
        second = self.client.get("/api/sync-entregas")

        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json()["message"], "Sync completed")
        self.assertEqual(first.json()["synced"], 1)
        self.assertEqual(first.json()["data"][0]["numero_nf"], "100")
        self.assertTrue(first.json()["data"][0]["status_pagamento"])

        self.assertEqual(second.json()["synced"], 0)
        self.assertNotIn("data", second.json())
        self.assertEqual(Sale.objects.count(), 1)

    def test_sync_entregas_nothing_delivered(self):
        res = self.client.get("/api/sync-entregas")

        self.assertEqual(res.json(), {"message": "No new deliveries found", "synced": 0})

    def test_sync_pagamentos(self):
        make_sale("100")
        make_receivable("100", status=Receivable.STATUS_PAID, data_pagamento=date(2024, 2, 1))

        res = self.client.get("/api/sync-pagamentos")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.json(),
            {"message": "Payment sync completed", "updated": 1, "failed": []},
        )

    def test_sync_pagamentos_empty_ledger(self):
        res = self.client.get("/api/sync-pagamentos")

        self.assertEqual(res.json()["message"], "No sales to update")
        self.assertEqual(res.json()["updated"], 0)

    @patch("sales.views.sync.sync_delivered_invoices")
    def test_sync_failure_is_500_with_details(self, sync):
        sync.side_effect = LedgerSyncError("Failed to insert sales: disk full")

        res = self.client.get("/api/sync-entregas")

        self.assertEqual(res.status_code, 500)
        self.assertEqual(
            res.json(),
            {"error": "Ledger sync failed", "details": "Failed to insert sales: disk full"},
        )

    def test_sync_requires_session(self):
        res = APIClient().get("/api/sync-pagamentos")

        self.assertEqual(res.status_code, 401)


class PublicEndpointTests(TestCase):
    def test_root(self):
        res = self.client.get("/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["status"], "online")

    def test_health(self):
        res = self.client.get("/health")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["database"], "connected")

    @patch("backend.urls.Sale.objects.exists", side_effect=DatabaseError("down"))
    def test_health_unhealthy(self, _exists):
        res = self.client.get("/health")

        self.assertEqual(res.status_code, 503)
        self.assertEqual(res.json()["status"], "unhealthy")
        self.assertEqual(res.json()["database"], "disconnected")

    def test_unknown_route(self):
        res = self.client.get("/nao-existe")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(
            res.json(), {"error": "404 - Route not found", "path": "/nao-existe"}
        )


class ApiSessionBoundaryTests(AuthenticatedAPITestCase):
    """
    GUARANTEES:
    - Every /api/ path (docs and unknown routes included) needs a session
    - Session checked before routing: unknown /api/ path without token is 401
    """

    def test_schema_and_docs_require_session(self):
        for path in ("/api/schema", "/api/docs"):
            res = APIClient().get(path)

            self.assertEqual(res.status_code, 401, path)

        self.verify.assert_not_called()

    def test_schema_with_session(self):
        res = self.client.get("/api/schema")

        self.assertEqual(res.status_code, 200)

    def test_unknown_api_route_without_session(self):
        res = APIClient().get("/api/nao-existe")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(
            res.json(),
            {"error": "Not authenticated", "message": "Session token not found"},
        )
        self.verify.assert_not_called()

    def test_unknown_api_route_with_session(self):
        res = self.client.get("/api/nao-existe")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(
            res.json(), {"error": "404 - Route not found", "path": "/api/nao-existe"}
        )
