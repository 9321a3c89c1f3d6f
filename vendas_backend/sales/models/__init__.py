# sales/models/__init__.py

"""
SALES MODELS PACKAGE EXPORTS

Purpose:
- Central export surface for sales app models.
"""

from .delivery import Delivery
from .receivable import Receivable
from .sale import Sale

__all__ = [
    "Delivery",
    "Receivable",
    "Sale",
]
