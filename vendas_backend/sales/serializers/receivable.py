# sales/serializers/receivable.py

from rest_framework import serializers

from sales.models import Receivable


class ReceivableSerializer(serializers.ModelSerializer):
    class Meta:
        model = Receivable
        fields = [
            "id",
            "numero_nf",
            "vendedor",
            "orgao",
            "banco",
            "tipo_nf",
            "valor",
            "data_emissao",
            "data_vencimento",
            "data_pagamento",
            "status",
            "observacoes",
        ]
        read_only_fields = fields
