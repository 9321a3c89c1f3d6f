from .delivery import DeliverySerializer
from .receivable import ReceivableSerializer
from .sale import SaleSerializer
from .sync import DeliverySyncResponseSerializer, PaymentSyncResponseSerializer

__all__ = [
    "SaleSerializer",
    "DeliverySerializer",
    "ReceivableSerializer",
    "DeliverySyncResponseSerializer",
    "PaymentSyncResponseSerializer",
]
