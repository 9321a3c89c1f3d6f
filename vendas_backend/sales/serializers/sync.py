# sales/serializers/sync.py

"""
Response shapes of the sync endpoints (schema only; views build plain dicts).
"""

from rest_framework import serializers

from .sale import SaleSerializer


class DeliverySyncResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    synced = serializers.IntegerField()
    data = SaleSerializer(many=True, required=False)


class PaymentSyncResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    updated = serializers.IntegerField()
    failed = serializers.ListField(child=serializers.CharField())
