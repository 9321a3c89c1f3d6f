# sales/views/sync.py

"""
PATH: sales/views/sync.py

ON-DEMAND LEDGER SYNC

- GET /api/sync-entregas    -> insert delivered freight invoices missing from vendas
- GET /api/sync-pagamentos  -> refresh payment status from contas receber

Both are idempotent: calling twice in a row reports 0 the second time.
Store failures surface as 500 {error, details} (see backend/exceptions.py).
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from sales.serializers import (
    DeliverySyncResponseSerializer,
    PaymentSyncResponseSerializer,
    SaleSerializer,
)
from sales.services.reconciler import sync_delivered_invoices, sync_payment_status

logger = logging.getLogger(__name__)


class SyncDeliveriesView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: DeliverySyncResponseSerializer},
        description="Insert delivered freight invoices that are not in the sales ledger yet.",
    )
    def get(self, request):
        logger.info("Delivery sync requested", extra={"user": str(request.user)})

        result = sync_delivered_invoices()

        payload = {"message": result.message, "synced": result.synced}
        if result.created:
            payload["data"] = SaleSerializer(result.created, many=True).data
        return Response(payload)


class SyncPaymentsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: PaymentSyncResponseSerializer},
        description=(
            "Copy paid status + payment date from receivables into the ledger. "
            "Failed per-invoice updates are not counted and are listed in `failed`."
        ),
    )
    def get(self, request):
        logger.info("Payment sync requested", extra={"user": str(request.user)})

        result = sync_payment_status()

        return Response(
            {
                "message": result.message,
                "updated": result.updated,
                "failed": result.failed,
            }
        )
