# sales/serializers/sale.py

from rest_framework import serializers

from sales.models import Sale


class SaleSerializer(serializers.ModelSerializer):
    """
    Ledger entry (read-only).
    Rows are written by the reconciler only.
    """

    class Meta:
        model = Sale
        fields = [
            "id",
            "numero_nf",
            "vendedor",
            "valor_nf",
            "data_emissao",
            "data_entrega",
            "nome_orgao",
            "cidade_destino",
            "status_pagamento",
            "data_pagamento",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
