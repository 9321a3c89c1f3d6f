# sales/models/receivable.py

"""
RECEIVABLE RECORD ("contas receber")

Source table written by the accounts-receivable app.
Mutated upstream when a payment is confirmed (status -> PAGO, data_pagamento set).

numero_nf points at a freight record by value only; no FK is enforced and an
invoice may have more than one receivable row.
"""

from decimal import Decimal

from django.db import models


class Receivable(models.Model):
    STATUS_PENDING = "PENDENTE"
    STATUS_PAID = "PAGO"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_PAID, "Paid"),
    ]

    numero_nf = models.CharField(max_length=64, db_index=True)
    vendedor = models.CharField(max_length=120, blank=True, default="")
    orgao = models.CharField(max_length=255, blank=True, default="")
    banco = models.CharField(max_length=120, blank=True, default="")
    tipo_nf = models.CharField(max_length=64, blank=True, default="")

    valor = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    data_emissao = models.DateField(null=True, blank=True)
    data_vencimento = models.DateField(null=True, blank=True)
    data_pagamento = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
    )

    observacoes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contas receber"
        ordering = ["-data_pagamento"]
        indexes = [
            models.Index(fields=["status"], name="receber_status_idx"),
            models.Index(fields=["vendedor"], name="receber_vendedor_idx"),
        ]

    @property
    def is_paid(self) -> bool:
        return self.status == self.STATUS_PAID

    def __str__(self):
        return f"NF {self.numero_nf} | {self.status}"
