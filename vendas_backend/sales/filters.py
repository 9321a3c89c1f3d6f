# sales/filters.py

"""
DASHBOARD REFINEMENT FILTERS (django-filter)

Optional query params on top of the scoped lists:
- mes (1-12), ano      -> month/year window on the list's date field
- busca                -> case-insensitive substring over the list's text fields
- transportadora/banco -> exact carrier / bank

All optional; an empty query string returns the full scoped set.
"""

from __future__ import annotations

from django.db.models import Q
from django_filters import rest_framework as filters

from sales.models import Delivery, Receivable, Sale


class PeriodSearchFilterSet(filters.FilterSet):
    """
    Subclasses set:
    - date_field: DateField used by mes/ano
    - search_fields: text fields used by busca
    """

    date_field = ""
    search_fields: tuple[str, ...] = ()

    mes = filters.NumberFilter(method="filter_month", min_value=1, max_value=12)
    ano = filters.NumberFilter(method="filter_year", min_value=1900, max_value=9999)
    busca = filters.CharFilter(method="filter_search")

    def filter_month(self, queryset, name, value):
        return queryset.filter(**{f"{self.date_field}__month": int(value)})

    def filter_year(self, queryset, name, value):
        return queryset.filter(**{f"{self.date_field}__year": int(value)})

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset

        q = Q()
        for field in self.search_fields:
            q |= Q(**{f"{field}__icontains": term})
        return queryset.filter(q)


class SaleFilterSet(PeriodSearchFilterSet):
    date_field = "data_entrega"
    search_fields = ("numero_nf", "nome_orgao", "cidade_destino")

    class Meta:
        model = Sale
        fields = ["status_pagamento"]


class DeliveryFilterSet(PeriodSearchFilterSet):
    date_field = "previsao_entrega"
    search_fields = ("numero_nf", "nome_orgao", "cidade_destino")

    transportadora = filters.CharFilter(field_name="transportadora")

    class Meta:
        model = Delivery
        fields = ["transportadora"]


class ReceivableFilterSet(PeriodSearchFilterSet):
    date_field = "data_pagamento"
    search_fields = ("numero_nf", "orgao", "banco")

    banco = filters.CharFilter(field_name="banco")

    class Meta:
        model = Receivable
        fields = ["banco"]
