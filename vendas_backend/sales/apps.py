# sales/apps.py

"""
SALES APP CONFIG

Sales ledger ("vendas") plus the two source tables it is reconciled from:
- freight deliveries ("controle frete")
- receivables ("contas receber")
"""

from django.apps import AppConfig


class SalesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sales"
    verbose_name = "Sales Ledger"
