"""Invoice Summary — сводка счёта для отображения.

Три строки: Subtotal / VAT / Total. Суммы приходят уже посчитанными,
форматирование — format_currency. Подпись строки НДС фиксированная
("VAT (15%)") и не зависит от фактической ставки.
"""

from dataclasses import dataclass

from src.billing.config import DEFAULT_BILLING_CONFIG, BillingConfig
from src.billing.totals import InvoiceTotals, totals_for_invoice
from src.core.domain.invoice import Invoice
from src.core.money.currency import DEFAULT_CURRENCY_SYMBOL, format_currency


SUBTOTAL_LABEL = "Subtotal:"
TOTAL_LABEL = "Total:"


@dataclass(frozen=True)
class SummaryRow:
    """Строка сводки."""

    label: str
    amount: str


@dataclass(frozen=True)
class InvoiceSummary:
    """Сводка счёта (суммы в центах)."""

    subtotal_cents: int
    vat_cents: int
    total_cents: int
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    vat_label: str = DEFAULT_BILLING_CONFIG.vat_label

    @classmethod
    def from_totals(
        cls,
        totals: InvoiceTotals,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        config: BillingConfig = DEFAULT_BILLING_CONFIG,
    ) -> "InvoiceSummary":
        return cls(
            subtotal_cents=totals.subtotal_cents,
            vat_cents=totals.vat_cents,
            total_cents=totals.total_cents,
            currency_symbol=currency_symbol,
            vat_label=config.vat_label,
        )

    def rows(self) -> list[SummaryRow]:
        """Строки сводки в порядке отображения."""
        return [
            SummaryRow(SUBTOTAL_LABEL, format_currency(self.subtotal_cents, self.currency_symbol)),
            SummaryRow(f"{self.vat_label}:", format_currency(self.vat_cents, self.currency_symbol)),
            SummaryRow(TOTAL_LABEL, format_currency(self.total_cents, self.currency_symbol)),
        ]

    def render(self) -> str:
        """Текстовое представление: по строке на каждую row."""
        return "\n".join(f"{row.label} {row.amount}" for row in self.rows())


def summary_for_invoice(
    invoice: Invoice, config: BillingConfig = DEFAULT_BILLING_CONFIG
) -> InvoiceSummary:
    """Сводка по счёту (итоги + символ валюты счёта)."""
    return InvoiceSummary.from_totals(
        totals_for_invoice(invoice),
        currency_symbol=invoice.currency_symbol,
        config=config,
    )
