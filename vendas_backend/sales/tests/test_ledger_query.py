# sales/tests/test_ledger_query.py

from datetime import date
from decimal import Decimal

from django.test import TestCase

from permissions.scoping import SellerScope
from sales.models import Receivable
from sales.services.exceptions import InvalidPeriodError
from sales.services.ledger_query import (
    deliveries_for_scope,
    monthly_paid_totals,
    sales_for_scope,
    settled_receivables_for_scope,
)
from sales.tests.factories import make_delivery, make_receivable, make_sale

ADMIN = SellerScope(identity="roberto", seller=None, is_admin=True)
MIGUEL = SellerScope(identity="vendas2", seller="MIGUEL")


class ScopedReadTests(TestCase):
    def setUp(self):
        make_sale("1", vendedor="MIGUEL", data_entrega=date(2024, 1, 5))
        make_sale("2", vendedor="MIGUEL", data_entrega=date(2024, 3, 5))
        make_sale("3", vendedor="ISAQUE", data_entrega=date(2024, 2, 5))

    def test_admin_sees_everything_newest_first(self):
        self.assertEqual(
            [s.numero_nf for s in sales_for_scope(ADMIN)], ["2", "3", "1"]
        )

    def test_seller_sees_own_rows(self):
        self.assertEqual([s.numero_nf for s in sales_for_scope(MIGUEL)], ["2", "1"])

    def test_admin_override_picks_seller(self):
        self.assertEqual(
            [s.numero_nf for s in sales_for_scope(ADMIN, vendedor="isaque")], ["3"]
        )

    def test_seller_override_never_widens(self):
        self.assertEqual(list(sales_for_scope(MIGUEL, vendedor="ISAQUE")), [])

    def test_deliveries_scoped(self):
        make_delivery("10", vendedor="MIGUEL")
        make_delivery("11", vendedor="ISAQUE")

        self.assertEqual([d.numero_nf for d in deliveries_for_scope(MIGUEL)], ["10"])
        self.assertEqual(deliveries_for_scope(ADMIN).count(), 2)

    def test_settled_receivables_only_paid(self):
        make_receivable("10", status=Receivable.STATUS_PAID, data_pagamento=date(2024, 1, 1))
        make_receivable("11", status=Receivable.STATUS_PENDING)

        self.assertEqual(
            [r.numero_nf for r in settled_receivables_for_scope(MIGUEL)], ["10"]
        )


class MonthlyPaidTotalsTests(TestCase):
    def setUp(self):
        make_receivable(
            "1", valor=Decimal("100.10"), status=Receivable.STATUS_PAID,
            data_pagamento=date(2024, 1, 15),
        )
        make_receivable(
            "2", valor=Decimal("50.00"), status=Receivable.STATUS_PAID,
            data_pagamento=date(2024, 1, 20),
        )
        make_receivable(
            "3", vendedor="ISAQUE", valor=Decimal("30.00"),
            status=Receivable.STATUS_PAID, data_pagamento=date(2024, 12, 1),
        )
        make_receivable(
            "4", valor=Decimal("999.00"), status=Receivable.STATUS_PAID,
            data_pagamento=date(2023, 12, 31),
        )
        make_receivable("5", valor=Decimal("500.00"))

    def test_admin_totals(self):
        payload = monthly_paid_totals(ADMIN, 2024)

        self.assertEqual(payload["ano"], 2024)
        self.assertEqual(len(payload["meses"]), 12)
        self.assertEqual(payload["meses"][0], {"mes": 1, "nome": "Janeiro", "total": "150.10"})
        self.assertEqual(payload["meses"][11]["total"], "30.00")
        self.assertEqual(payload["meses"][5]["total"], "0.00")
        self.assertEqual(payload["total"], "180.10")

    def test_seller_totals(self):
        payload = monthly_paid_totals(MIGUEL, 2024)

        self.assertEqual(payload["total"], "150.10")
        self.assertEqual(payload["meses"][11]["total"], "0.00")

    def test_invalid_year(self):
        with self.assertRaises(InvalidPeriodError):
            monthly_paid_totals(ADMIN, 20245)
