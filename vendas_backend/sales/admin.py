# sales/admin.py

from django.contrib import admin

from sales.models import Delivery, Receivable, Sale


# ======================================================
# SALES LEDGER ADMIN
# ======================================================


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = (
        "numero_nf",
        "vendedor",
        "valor_nf",
        "data_entrega",
        "status_pagamento",
        "data_pagamento",
    )
    readonly_fields = (
        "numero_nf",
        "vendedor",
        "valor_nf",
        "data_emissao",
        "data_entrega",
        "nome_orgao",
        "cidade_destino",
        "created_at",
        "updated_at",
    )
    search_fields = ("numero_nf", "nome_orgao", "cidade_destino")
    list_filter = ("status_pagamento", "vendedor")


# ======================================================
# FREIGHT CONTROL ADMIN
# ======================================================


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    list_display = (
        "numero_nf",
        "vendedor",
        "transportadora",
        "previsao_entrega",
        "status",
    )
    search_fields = ("numero_nf", "nome_orgao", "transportadora")
    list_filter = ("status", "vendedor")


# ======================================================
# RECEIVABLES ADMIN
# ======================================================


@admin.register(Receivable)
class ReceivableAdmin(admin.ModelAdmin):
    list_display = (
        "numero_nf",
        "vendedor",
        "valor",
        "data_vencimento",
        "status",
        "data_pagamento",
    )
    search_fields = ("numero_nf", "orgao", "banco")
    list_filter = ("status", "banco")
