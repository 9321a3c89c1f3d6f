# sales/models/sale.py

from decimal import Decimal

from django.db import models


class Sale(models.Model):
    """
    Unified sales ledger entry ("vendas"), one row per invoice number.

    GUARANTEES:
    - numero_nf is unique: the reconciler's dedup anchor
    - Created once from a delivered freight record
    - Only payment fields change afterwards (status_pagamento, data_pagamento)
    - Never deleted by the sync
    """

    numero_nf = models.CharField(
        max_length=64,
        unique=True,
        help_text="Invoice number (nota fiscal)",
    )

    vendedor = models.CharField(max_length=120, blank=True, default="")

    valor_nf = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    data_emissao = models.DateField(null=True, blank=True)
    data_entrega = models.DateField(
        null=True,
        blank=True,
        help_text="Delivery date (copied from the freight forecast)",
    )

    nome_orgao = models.CharField(max_length=255, blank=True, default="")
    cidade_destino = models.CharField(max_length=120, blank=True, default="")

    status_pagamento = models.BooleanField(default=False)
    data_pagamento = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "vendas"
        ordering = ["-data_entrega"]
        indexes = [
            models.Index(fields=["vendedor"], name="vendas_vendedor_idx"),
            models.Index(fields=["data_entrega"], name="vendas_data_entrega_idx"),
        ]

    PAYMENT_FIELDS = ("status_pagamento", "data_pagamento", "updated_at")

    _IMMUTABLE_FIELDS = (
        "numero_nf",
        "vendedor",
        "valor_nf",
        "data_emissao",
        "data_entrega",
        "nome_orgao",
        "cidade_destino",
    )

    def _validate_immutable(self, previous: "Sale"):
        for field in self._IMMUTABLE_FIELDS:
            if getattr(self, field) != getattr(previous, field):
                raise ValueError(
                    f"Sale {previous.numero_nf} is immutable. "
                    f"Field '{field}' cannot be changed."
                )

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            previous = Sale.objects.filter(pk=self.pk).first()
            if previous is not None:
                self._validate_immutable(previous)

        super().save(*args, **kwargs)

    def __str__(self):
        return f"NF {self.numero_nf} | {self.vendedor} | {self.valor_nf}"
