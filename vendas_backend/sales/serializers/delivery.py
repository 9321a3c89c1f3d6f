# sales/serializers/delivery.py

from rest_framework import serializers

from sales.models import Delivery


class DeliverySerializer(serializers.ModelSerializer):
    class Meta:
        model = Delivery
        fields = [
            "id",
            "numero_nf",
            "documento",
            "vendedor",
            "data_emissao",
            "data_coleta",
            "previsao_entrega",
            "nome_orgao",
            "contato_orgao",
            "cidade_destino",
            "transportadora",
            "valor_nf",
            "valor_frete",
            "status",
        ]
        read_only_fields = fields
