# sales/views/ledger.py

"""
PATH: sales/views/ledger.py

SCOPED DASHBOARD READS

- GET /api/vendas       -> ledger entries, newest delivery first
- GET /api/entregas     -> freight deliveries, newest forecast first
- GET /api/liquidadas   -> paid receivables, newest payment first
- GET /api/painel       -> paid value per month for a year

Security:
- X-Session-Token verified by the portal (default authentication)
- Rows restricted by the caller's seller scope (admins see everything)
- Optional ?vendedor= narrows further, never widens
"""

from __future__ import annotations

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.scoping import HasSellerScope, get_request_scope
from sales.filters import DeliveryFilterSet, ReceivableFilterSet, SaleFilterSet
from sales.serializers import DeliverySerializer, ReceivableSerializer, SaleSerializer
from sales.services.exceptions import InvalidPeriodError
from sales.services.ledger_query import (
    deliveries_for_scope,
    monthly_paid_totals,
    sales_for_scope,
    settled_receivables_for_scope,
)

VENDEDOR_PARAM = OpenApiParameter(
    name="vendedor",
    type=OpenApiTypes.STR,
    required=False,
    description="Seller name. Narrows the caller's scope; admins may pick any seller.",
)


class ScopedListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, HasSellerScope]
    filter_backends = [DjangoFilterBackend]
    pagination_class = None

    def _vendedor_override(self):
        return self.request.query_params.get("vendedor")


class SaleListView(ScopedListView):
    serializer_class = SaleSerializer
    filterset_class = SaleFilterSet

    def get_queryset(self):
        return sales_for_scope(
            get_request_scope(self.request), vendedor=self._vendedor_override()
        )

    @extend_schema(
        parameters=[VENDEDOR_PARAM],
        description="Ledger entries visible to the caller, ordered by data_entrega desc.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class DeliveryListView(ScopedListView):
    serializer_class = DeliverySerializer
    filterset_class = DeliveryFilterSet

    def get_queryset(self):
        return deliveries_for_scope(
            get_request_scope(self.request), vendedor=self._vendedor_override()
        )

    @extend_schema(
        parameters=[VENDEDOR_PARAM],
        description="Freight deliveries visible to the caller, ordered by previsao_entrega desc.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class SettledReceivableListView(ScopedListView):
    serializer_class = ReceivableSerializer
    filterset_class = ReceivableFilterSet

    def get_queryset(self):
        return settled_receivables_for_scope(
            get_request_scope(self.request), vendedor=self._vendedor_override()
        )

    @extend_schema(
        parameters=[VENDEDOR_PARAM],
        description="Paid receivables visible to the caller, ordered by data_pagamento desc.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class PaidDashboardView(APIView):
    """
    Paid value per month (by payment date) for the selected year.
    """

    permission_classes = [IsAuthenticated, HasSellerScope]

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="ano",
                type=OpenApiTypes.INT,
                required=False,
                description="Year (YYYY). Defaults to the current year.",
            ),
            VENDEDOR_PARAM,
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        raw_year = (request.query_params.get("ano") or "").strip()

        try:
            year = int(raw_year) if raw_year else timezone.localdate().year
            payload = monthly_paid_totals(
                get_request_scope(request),
                year,
                vendedor=request.query_params.get("vendedor"),
            )
        except (ValueError, InvalidPeriodError):
            return Response(
                {"error": "Invalid year", "message": "Use ano=YYYY."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(payload)
