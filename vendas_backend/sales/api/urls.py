# sales/api/urls.py

"""
SALES API URLS (CANONICAL)

Mounted at /api/ by backend/urls.py. Paths carry no trailing slash so the
dashboard can call them exactly as documented:

- GET /api/vendas
- GET /api/entregas?vendedor=MIGUEL
- GET /api/liquidadas?vendedor=MIGUEL
- GET /api/painel?ano=2024
- GET /api/sync-entregas
- GET /api/sync-pagamentos
"""

from django.urls import path

from sales.views.ledger import (
    DeliveryListView,
    PaidDashboardView,
    SaleListView,
    SettledReceivableListView,
)
from sales.views.sync import SyncDeliveriesView, SyncPaymentsView

urlpatterns = [
    path("vendas", SaleListView.as_view(), name="sales-list"),
    path("entregas", DeliveryListView.as_view(), name="deliveries-list"),
    path("liquidadas", SettledReceivableListView.as_view(), name="settled-list"),
    path("painel", PaidDashboardView.as_view(), name="paid-dashboard"),
    path("sync-entregas", SyncDeliveriesView.as_view(), name="sync-deliveries"),
    path("sync-pagamentos", SyncPaymentsView.as_view(), name="sync-payments"),
]
