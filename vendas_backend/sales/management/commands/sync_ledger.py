# sales/management/commands/sync_ledger.py

from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from sales.models import Delivery, Receivable, Sale
from sales.services.exceptions import LedgerSyncError
from sales.services.reconciler import sync_delivered_invoices, sync_payment_status


class Command(BaseCommand):
    help = (
        "Insert delivered freight invoices missing from the sales ledger and "
        "refresh payment status from receivables. Runs both steps by default."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--deliveries",
            action="store_true",
            help="Only insert delivered invoices missing from vendas",
        )
        parser.add_argument(
            "--payments",
            action="store_true",
            help="Only refresh status_pagamento / data_pagamento",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would change, then roll everything back",
        )

    def handle(self, *args, **options):
        run_deliveries = bool(options.get("deliveries"))
        run_payments = bool(options.get("payments"))
        dry_run = bool(options.get("dry_run"))

        if not run_deliveries and not run_payments:
            run_deliveries = run_payments = True

        self.stdout.write(self.style.MIGRATE_HEADING("Sync freight / receivables → vendas"))
        self.stdout.write(f"Freight records:  {Delivery.objects.count()}")
        self.stdout.write(f"Receivables:      {Receivable.objects.count()}")
        self.stdout.write(f"Ledger rows:      {Sale.objects.count()}")

        if dry_run:
            self.stdout.write("DRY RUN: no database changes will be saved.\n")

        delivery_result = None
        payment_result = None

        try:
            with transaction.atomic():
                if run_deliveries:
                    delivery_result = sync_delivered_invoices()
                    for sale in delivery_result.created:
                        self.stdout.write(f"INSERT NF {sale.numero_nf} ({sale.vendedor})")

                if run_payments:
                    payment_result = sync_payment_status()

                if dry_run:
                    transaction.set_rollback(True)
        except LedgerSyncError as exc:
            self.stderr.write(self.style.ERROR(f"Sync failed: {exc}"))
            raise SystemExit(1)

        self.stdout.write("\n--- Summary ---")
        if delivery_result is not None:
            self.stdout.write(f"Delivered found:  {delivery_result.delivered}")
            self.stdout.write(f"Sales inserted:   {delivery_result.synced}")
            self.stdout.write(f"                  {delivery_result.message}")
        if payment_result is not None:
            self.stdout.write(f"Sales checked:    {payment_result.checked}")
            self.stdout.write(f"Payments updated: {payment_result.updated}")
            self.stdout.write(f"Payments failed:  {len(payment_result.failed)}")

        if payment_result is not None and payment_result.failed:
            self.stdout.write("\n--- Failed invoices ---")
            for numero_nf in payment_result.failed[:50]:
                self.stdout.write(f"- NF {numero_nf}")
            if len(payment_result.failed) > 50:
                self.stdout.write(f"... ({len(payment_result.failed) - 50} more)")

            if not dry_run:
                raise SystemExit(2)

        self.stdout.write(self.style.SUCCESS("Done."))
