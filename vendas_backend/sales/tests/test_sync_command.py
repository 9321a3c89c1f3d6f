# sales/tests/test_sync_command.py

from datetime import date
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.test import TestCase

from sales.models import Receivable, Sale
from sales.services.reconciler import PaymentSyncResult
from sales.tests.factories import make_delivery, make_receivable, make_sale


class SyncLedgerCommandTests(TestCase):
    def _run(self, *args):
        out = StringIO()
        call_command("sync_ledger", *args, stdout=out, stderr=StringIO())
        return out.getvalue()

    def test_runs_both_steps_by_default(self):
        make_delivery("100")
        make_sale("200")
        make_receivable("200", status=Receivable.STATUS_PAID, data_pagamento=date(2024, 3, 3))

        output = self._run()

        self.assertIn("Sales inserted:   1", output)
        self.assertIn("Payments updated: 1", output)
        self.assertTrue(Sale.objects.filter(numero_nf="100").exists())
        self.assertTrue(Sale.objects.get(numero_nf="200").status_pagamento)

    def test_deliveries_only(self):
        make_delivery("100")

        output = self._run("--deliveries")

        self.assertIn("Sales inserted:   1", output)
        self.assertNotIn("Payments updated", output)

    def test_dry_run_rolls_back(self):
        make_delivery("100")

        output = self._run("--dry-run")

        self.assertIn("DRY RUN", output)
        self.assertIn("INSERT NF 100", output)
        self.assertFalse(Sale.objects.exists())

    @patch("sales.management.commands.sync_ledger.sync_payment_status")
    def test_failed_payment_updates_exit_2(self, sync):
        sync.return_value = PaymentSyncResult(updated=0, checked=1, failed=["100"])

        with self.assertRaises(SystemExit) as ctx:
            self._run("--payments")

        self.assertEqual(ctx.exception.code, 2)
