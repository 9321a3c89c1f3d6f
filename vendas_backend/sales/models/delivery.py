# sales/models/delivery.py

"""
FREIGHT DELIVERY RECORD ("controle frete")

Source table written by the freight-control app.
This backend only reads it (reconciler + entregas listing).
"""

from decimal import Decimal

from django.db import models


class Delivery(models.Model):
    STATUS_PENDING = "PENDENTE"
    STATUS_DELIVERED = "ENTREGUE"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_DELIVERED, "Delivered"),
    ]

    numero_nf = models.CharField(max_length=64, unique=True)
    documento = models.CharField(max_length=64, blank=True, default="")
    vendedor = models.CharField(max_length=120, blank=True, default="")

    data_emissao = models.DateField(null=True, blank=True)
    data_coleta = models.DateField(null=True, blank=True)
    previsao_entrega = models.DateField(null=True, blank=True)

    nome_orgao = models.CharField(max_length=255, blank=True, default="")
    contato_orgao = models.CharField(max_length=255, blank=True, default="")
    cidade_destino = models.CharField(max_length=120, blank=True, default="")
    transportadora = models.CharField(max_length=120, blank=True, default="")

    valor_nf = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    valor_frete = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    # Free text upstream: anything not PENDENTE/ENTREGUE is "other".
    status = models.CharField(
        max_length=32,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "controle frete"
        ordering = ["-previsao_entrega"]
        indexes = [
            models.Index(fields=["status"], name="frete_status_idx"),
            models.Index(fields=["vendedor"], name="frete_vendedor_idx"),
        ]

    @property
    def is_delivered(self) -> bool:
        return self.status == self.STATUS_DELIVERED

    def __str__(self):
        return f"NF {self.numero_nf} | {self.status}"
