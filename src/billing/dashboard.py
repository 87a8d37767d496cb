"""Dashboard — агрегаты по счетам пользователя.

- total_revenue_cents: сумма итогов оплаченных счетов
- unpaid_count: счета в любом статусе, кроме PAID
- overdue_count: просроченные счета
- outstanding_cents: остаток к оплате по отправленным (не DRAFT) счетам
- active_client_count: число разных client_id среди счетов
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from src.billing.ledger import balance_due, derive_status
from src.billing.totals import totals_for_invoice
from src.core.domain.invoice import Invoice, InvoiceStatus
from src.core.domain.payment import Payment


@dataclass(frozen=True)
class DashboardStats:
    """Агрегаты для дашборда (суммы в центах)."""

    invoice_count: int
    total_revenue_cents: int
    unpaid_count: int
    overdue_count: int
    outstanding_cents: int
    active_client_count: int


def compute_dashboard_stats(
    ledger: Iterable[tuple[Invoice, Sequence[Payment]]],
    today: date,
) -> DashboardStats:
    """Агрегаты по парам (счёт, платежи по счёту).

    Статус каждого счёта пересчитывается на дату today (derive_status).
    """
    invoice_count = 0
    revenue = 0
    unpaid = 0
    overdue = 0
    outstanding = 0
    client_ids: set[str] = set()

    for invoice, payments in ledger:
        invoice_count += 1
        client_ids.add(invoice.client_id)
        status = derive_status(invoice, payments, today)

        if status == InvoiceStatus.PAID:
            revenue += totals_for_invoice(invoice).total_cents
            continue

        unpaid += 1
        if status == InvoiceStatus.OVERDUE:
            overdue += 1
        if status != InvoiceStatus.DRAFT:
            outstanding += balance_due(invoice, payments)

    return DashboardStats(
        invoice_count=invoice_count,
        total_revenue_cents=revenue,
        unpaid_count=unpaid,
        overdue_count=overdue,
        outstanding_cents=outstanding,
        active_client_count=len(client_ids),
    )
