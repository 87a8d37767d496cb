"""Invoice Totals — итоги счёта по позициям.

subtotal = Σ round(quantity * unit_price_cents)
VAT      = calculate_vat(subtotal, vat_rate)
total    = subtotal + VAT

НДС считается один раз от subtotal, а не по каждой позиции.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from src.billing.config import DEFAULT_BILLING_CONFIG, BillingConfig
from src.core.domain.invoice import Invoice, LineItem
from src.core.money.vat import calculate_vat, resolve_vat_rate


@dataclass(frozen=True)
class InvoiceTotals:
    """Итоги счёта (все суммы в центах)."""

    subtotal_cents: int
    vat_cents: int
    total_cents: int
    vat_rate: float


def calculate_invoice_totals(
    items: Iterable[LineItem],
    vat_rate: Optional[float] = None,
    config: BillingConfig = DEFAULT_BILLING_CONFIG,
) -> InvoiceTotals:
    """Итоги по списку позиций.

    Args:
        items: позиции счёта
        vat_rate: ставка НДС как дробь; None → config.default_vat_rate
        config: конфигурация биллинга

    Returns:
        InvoiceTotals
    """
    rate = resolve_vat_rate(vat_rate, default=config.default_vat_rate)
    subtotal = sum(item.total_cents() for item in items)
    vat = calculate_vat(subtotal, rate)

    return InvoiceTotals(
        subtotal_cents=subtotal,
        vat_cents=vat,
        total_cents=subtotal + vat,
        vat_rate=rate,
    )


def totals_for_invoice(invoice: Invoice) -> InvoiceTotals:
    """Итоги счёта по его позициям и ставке."""
    return calculate_invoice_totals(invoice.items, vat_rate=invoice.vat_rate)


def generate_invoice_number(now_ms: int) -> str:
    """Номер нового счёта: "INV-<unix ms>"."""
    return f"INV-{now_ms}"
