"""Billing — итоги счетов, платежи, сводки и дашборд.

Чистые функции поверх доменных моделей src.core.domain; хранение
данных — ответственность вызывающего кода (ORM, HTTP-слой).
"""

from .config import DEFAULT_BILLING_CONFIG, BillingConfig
from .dashboard import DashboardStats, compute_dashboard_stats
from .ledger import (
    PaymentApplication,
    PaymentExceedsBalance,
    apply_payment,
    balance_due,
    derive_status,
    settle_invoice,
    total_paid,
)
from .summary import InvoiceSummary, SummaryRow, summary_for_invoice
from .totals import (
    InvoiceTotals,
    calculate_invoice_totals,
    generate_invoice_number,
    totals_for_invoice,
)

__all__ = [
    # Config
    "BillingConfig",
    "DEFAULT_BILLING_CONFIG",
    # Totals
    "InvoiceTotals",
    "calculate_invoice_totals",
    "generate_invoice_number",
    "totals_for_invoice",
    # Ledger
    "PaymentApplication",
    "PaymentExceedsBalance",
    "apply_payment",
    "balance_due",
    "derive_status",
    "settle_invoice",
    "total_paid",
    # Summary
    "InvoiceSummary",
    "SummaryRow",
    "summary_for_invoice",
    # Dashboard
    "DashboardStats",
    "compute_dashboard_stats",
]
