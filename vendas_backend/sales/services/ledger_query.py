# sales/services/ledger_query.py

"""
LEDGER QUERIES (SCOPED READS)

Every read goes through a SellerScope:
- admins: unrestricted
- sellers: vendedor == their seller name

Explicit `vendedor` override (split dashboards ask for ?vendedor=MIGUEL):
- applied ON TOP of the scope, never instead of it
- admins may pick any seller; a seller asking for someone else gets nothing

No pagination: dashboards always receive the full scoped set.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.db.models import Sum
from django.db.models.functions import ExtractMonth

from permissions.scoping import SellerScope, normalize_seller
from sales.models import Delivery, Receivable, Sale
from sales.services.exceptions import InvalidPeriodError

MONTH_NAMES = [
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
]


def _apply_override(qs, vendedor: Optional[str]):
    seller = normalize_seller(vendedor)
    if not seller:
        return qs
    return qs.filter(vendedor=seller)


def sales_for_scope(scope: SellerScope, *, vendedor: Optional[str] = None):
    qs = scope.apply(Sale.objects.all())
    return _apply_override(qs, vendedor).order_by("-data_entrega", "-id")


def deliveries_for_scope(scope: SellerScope, *, vendedor: Optional[str] = None):
    qs = scope.apply(Delivery.objects.all())
    return _apply_override(qs, vendedor).order_by("-previsao_entrega", "-id")


def settled_receivables_for_scope(
    scope: SellerScope, *, vendedor: Optional[str] = None
):
    qs = scope.apply(Receivable.objects.filter(status=Receivable.STATUS_PAID))
    return _apply_override(qs, vendedor).order_by("-data_pagamento", "-id")


def _money(x) -> str:
    if x is None:
        return "0.00"
    return f"{Decimal(str(x)):.2f}"


def monthly_paid_totals(
    scope: SellerScope, year: int, *, vendedor: Optional[str] = None
) -> dict:
    """
    Paid value per month of `year`, by receivable payment date.

    Returns:
        {"ano": 2024, "meses": [{"mes": 1, "nome": "Janeiro", "total": "0.00"}, ...],
         "total": "1234.56"}
    """
    if not 1900 <= int(year) <= 9999:
        raise InvalidPeriodError(f"Invalid year: {year}")

    rows = (
        settled_receivables_for_scope(scope, vendedor=vendedor)
        .filter(data_pagamento__year=year)
        .annotate(mes=ExtractMonth("data_pagamento"))
        .order_by()
        .values("mes")
        .annotate(total=Sum("valor"))
    )
    by_month = {r["mes"]: r["total"] or Decimal("0.00") for r in rows}

    meses = []
    year_total = Decimal("0.00")
    for i, name in enumerate(MONTH_NAMES, start=1):
        value = Decimal(str(by_month.get(i, Decimal("0.00"))))
        year_total += value
        meses.append({"mes": i, "nome": name, "total": _money(value)})

    return {"ano": int(year), "meses": meses, "total": _money(year_total)}
