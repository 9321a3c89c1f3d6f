"""
======================================================
PATH: sales/migrations/0001_initial.py
======================================================
MIGRATION: CREATE vendas / "controle frete" / "contas receber"

Purpose:
- vendas: the sales ledger owned by this backend (unique numero_nf).
- "controle frete" and "contas receber": source tables shared with the
  freight and receivables apps. Created here so local/dev/test databases
  match the hosted schema.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Delivery",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("numero_nf", models.CharField(max_length=64, unique=True)),
                ("documento", models.CharField(blank=True, default="", max_length=64)),
                ("vendedor", models.CharField(blank=True, default="", max_length=120)),
                ("data_emissao", models.DateField(blank=True, null=True)),
                ("data_coleta", models.DateField(blank=True, null=True)),
                ("previsao_entrega", models.DateField(blank=True, null=True)),
                ("nome_orgao", models.CharField(blank=True, default="", max_length=255)),
                ("contato_orgao", models.CharField(blank=True, default="", max_length=255)),
                ("cidade_destino", models.CharField(blank=True, default="", max_length=120)),
                ("transportadora", models.CharField(blank=True, default="", max_length=120)),
                (
                    "valor_nf",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12),
                ),
                (
                    "valor_frete",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDENTE", "Pending"), ("ENTREGUE", "Delivered")],
                        default="PENDENTE",
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "controle frete",
                "ordering": ["-previsao_entrega"],
                "indexes": [
                    models.Index(fields=["status"], name="frete_status_idx"),
                    models.Index(fields=["vendedor"], name="frete_vendedor_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Receivable",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("numero_nf", models.CharField(db_index=True, max_length=64)),
                ("vendedor", models.CharField(blank=True, default="", max_length=120)),
                ("orgao", models.CharField(blank=True, default="", max_length=255)),
                ("banco", models.CharField(blank=True, default="", max_length=120)),
                ("tipo_nf", models.CharField(blank=True, default="", max_length=64)),
                (
                    "valor",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12),
                ),
                ("data_emissao", models.DateField(blank=True, null=True)),
                ("data_vencimento", models.DateField(blank=True, null=True)),
                ("data_pagamento", models.DateField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDENTE", "Pending"), ("PAGO", "Paid")],
                        default="PENDENTE",
                        max_length=32,
                    ),
                ),
                ("observacoes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "contas receber",
                "ordering": ["-data_pagamento"],
                "indexes": [
                    models.Index(fields=["status"], name="receber_status_idx"),
                    models.Index(fields=["vendedor"], name="receber_vendedor_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Sale",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "numero_nf",
                    models.CharField(
                        help_text="Invoice number (nota fiscal)",
                        max_length=64,
                        unique=True,
                    ),
                ),
                ("vendedor", models.CharField(blank=True, default="", max_length=120)),
                (
                    "valor_nf",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12),
                ),
                ("data_emissao", models.DateField(blank=True, null=True)),
                (
                    "data_entrega",
                    models.DateField(
                        blank=True,
                        help_text="Delivery date (copied from the freight forecast)",
                        null=True,
                    ),
                ),
                ("nome_orgao", models.CharField(blank=True, default="", max_length=255)),
                ("cidade_destino", models.CharField(blank=True, default="", max_length=120)),
                ("status_pagamento", models.BooleanField(default=False)),
                ("data_pagamento", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "vendas",
                "ordering": ["-data_entrega"],
                "indexes": [
                    models.Index(fields=["vendedor"], name="vendas_vendedor_idx"),
                    models.Index(fields=["data_entrega"], name="vendas_data_entrega_idx"),
                ],
            },
        ),
    ]
