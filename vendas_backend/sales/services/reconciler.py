# sales/services/reconciler.py

"""
LEDGER RECONCILER (FREIGHT + RECEIVABLES -> VENDAS)

Two independent operations. Both are idempotent and may run in any order,
any number of times.

sync_delivered_invoices()
- delivered freight invoices not yet in the ledger are inserted
- payment fields are seeded from receivables (default: unpaid, no date)
- the insert is one atomic batch: all rows or none

sync_payment_status()
- every ledger row whose receivable paid-flag differs is updated
  (status_pagamento + data_pagamento only)
- each update runs in its own savepoint; a failed update is logged,
  NOT counted, and reported in `failed`

Matching is by exact numero_nf string equality. Nothing is ever deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from sales.models import Delivery, Receivable, Sale
from sales.services.exceptions import LedgerSyncError

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


@dataclass(frozen=True)
class PaymentSnapshot:
    paid: bool
    data_pagamento: Optional[date] = None


UNPAID = PaymentSnapshot(paid=False, data_pagamento=None)


@dataclass
class DeliverySyncResult:
    synced: int = 0
    delivered: int = 0
    created: list[Sale] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.synced:
            return "Sync completed"
        if not self.delivered:
            return "No new deliveries found"
        return "All deliveries are already synced"


@dataclass
class PaymentSyncResult:
    updated: int = 0
    checked: int = 0
    failed: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if not self.checked:
            return "No sales to update"
        return "Payment sync completed"


def _money(v: Optional[Decimal]) -> Decimal:
    if v is None:
        return Decimal("0.00")
    return Decimal(v).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def payment_lookup() -> dict[str, PaymentSnapshot]:
    """
    numero_nf -> PaymentSnapshot built from receivables.

    Several receivables for one invoice: the last one (by id) wins.
    """
    qs = Receivable.objects.all()

    lookup: dict[str, PaymentSnapshot] = {}
    for numero_nf, status, data_pagamento in qs.order_by("id").values_list(
        "numero_nf", "status", "data_pagamento"
    ):
        lookup[numero_nf] = PaymentSnapshot(
            paid=status == Receivable.STATUS_PAID,
            data_pagamento=data_pagamento,
        )
    return lookup


def build_sale(delivery: Delivery, payment: PaymentSnapshot = UNPAID) -> Sale:
    return Sale(
        numero_nf=delivery.numero_nf,
        vendedor=delivery.vendedor,
        valor_nf=_money(delivery.valor_nf),
        data_emissao=delivery.data_emissao,
        data_entrega=delivery.previsao_entrega,
        nome_orgao=delivery.nome_orgao,
        cidade_destino=delivery.cidade_destino,
        status_pagamento=payment.paid,
        data_pagamento=payment.data_pagamento,
    )


# ============================================================
# INSERT NEW DELIVERIES
# ============================================================


def sync_delivered_invoices() -> DeliverySyncResult:
    logger.info("Syncing delivered invoices from freight control")

    try:
        delivered = list(
            Delivery.objects.filter(status=Delivery.STATUS_DELIVERED).order_by("id")
        )
    except DatabaseError as exc:
        logger.exception("Failed to fetch delivered freight records")
        raise LedgerSyncError(f"Failed to fetch deliveries: {exc}") from exc

    result = DeliverySyncResult(delivered=len(delivered))
    if not delivered:
        return result

    try:
        existing = set(Sale.objects.values_list("numero_nf", flat=True))
    except DatabaseError as exc:
        logger.exception("Failed to fetch existing ledger invoices")
        raise LedgerSyncError(f"Failed to fetch existing sales: {exc}") from exc

    new_deliveries: list[Delivery] = []
    seen: set[str] = set()
    for delivery in delivered:
        if delivery.numero_nf in existing or delivery.numero_nf in seen:
            continue
        seen.add(delivery.numero_nf)
        new_deliveries.append(delivery)

    logger.info(
        "Delivered invoices compared with ledger",
        extra={
            "delivered": len(delivered),
            "existing": len(existing),
            "new": len(new_deliveries),
        },
    )

    if not new_deliveries:
        return result

    try:
        payments = payment_lookup()
    except DatabaseError as exc:
        logger.exception("Failed to fetch receivables")
        raise LedgerSyncError(f"Failed to fetch receivables: {exc}") from exc

    rows = [build_sale(d, payments.get(d.numero_nf, UNPAID)) for d in new_deliveries]

    try:
        with transaction.atomic():
            created = Sale.objects.bulk_create(rows)
    except DatabaseError as exc:
        logger.exception(
            "Failed to insert new sales", extra={"batch_size": len(rows)}
        )
        raise LedgerSyncError(f"Failed to insert sales: {exc}") from exc

    result.created = list(created)
    result.synced = len(created)

    logger.info("New sales synced", extra={"synced": result.synced})
    return result


# ============================================================
# UPDATE PAYMENT STATUS
# ============================================================


def _apply_payment(sale: Sale, payment: PaymentSnapshot) -> bool:
    with transaction.atomic():
        changed = Sale.objects.filter(pk=sale.pk).update(
            status_pagamento=payment.paid,
            data_pagamento=payment.data_pagamento,
            updated_at=timezone.now(),
        )
    return changed > 0


def sync_payment_status() -> PaymentSyncResult:
    logger.info("Syncing payment status from receivables")

    try:
        sales = list(
            Sale.objects.order_by("id").only(
                "id", "numero_nf", "status_pagamento", "data_pagamento"
            )
        )
    except DatabaseError as exc:
        logger.exception("Failed to fetch sales")
        raise LedgerSyncError(f"Failed to fetch sales: {exc}") from exc

    result = PaymentSyncResult(checked=len(sales))
    if not sales:
        return result

    try:
        payments = payment_lookup()
    except DatabaseError as exc:
        logger.exception("Failed to fetch receivables")
        raise LedgerSyncError(f"Failed to fetch receivables: {exc}") from exc

    for sale in sales:
        payment = payments.get(sale.numero_nf)
        if payment is None or sale.status_pagamento == payment.paid:
            continue

        try:
            changed = _apply_payment(sale, payment)
        except DatabaseError:
            logger.warning(
                "Payment status update failed",
                exc_info=True,
                extra={"numero_nf": sale.numero_nf},
            )
            result.failed.append(sale.numero_nf)
            continue

        if changed:
            result.updated += 1

    logger.info(
        "Payment status synced",
        extra={"updated": result.updated, "failed": len(result.failed)},
    )
    return result
