"""Payment Ledger — применение платежей к счёту и статусы счёта.

Правила:
- Сумма всех платежей по счёту не может превышать итог счёта с НДС
- Полностью оплаченный счёт → PAID
- Частично оплаченный счёт → SENT
- Неоплаченный счёт после due_date → OVERDUE (кроме DRAFT)

Хранение платежей и счетов — ответственность вызывающего кода:
функции модуля принимают текущие платежи и возвращают новые
экземпляры моделей.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from src.billing.totals import totals_for_invoice
from src.core.domain.invoice import Invoice, InvoiceStatus
from src.core.domain.payment import Payment, PaymentMethod

logger = logging.getLogger(__name__)


class PaymentExceedsBalance(ValueError):
    """Платёж превышает остаток по счёту."""

    def __init__(self, invoice_number: str, amount_cents: int, balance_due_cents: int):
        self.invoice_number = invoice_number
        self.amount_cents = amount_cents
        self.balance_due_cents = balance_due_cents
        super().__init__(
            f"Payment amount {amount_cents} exceeds remaining balance "
            f"{balance_due_cents} of invoice {invoice_number}"
        )


@dataclass(frozen=True)
class PaymentApplication:
    """Результат применения платежа к счёту."""

    invoice: Invoice
    payment: Payment

    total_paid_cents: int
    balance_due_cents: int

    # Диагностика
    status_changed: bool
    previous_status: InvoiceStatus


# =============================================================================
# БАЛАНС
# =============================================================================


def total_paid(payments: Iterable[Payment]) -> int:
    """Сумма платежей в центах."""
    return sum(payment.amount_cents for payment in payments)


def balance_due(invoice: Invoice, payments: Iterable[Payment]) -> int:
    """Остаток к оплате (центы, не меньше нуля)."""
    total = totals_for_invoice(invoice).total_cents
    return max(total - total_paid(payments), 0)


def _status_after_payment(invoice: Invoice, paid_cents: int, total_cents: int) -> InvoiceStatus:
    if paid_cents >= total_cents:
        return InvoiceStatus.PAID
    if paid_cents > 0:
        return InvoiceStatus.SENT
    return invoice.status


# =============================================================================
# ПЛАТЕЖИ
# =============================================================================


def apply_payment(
    invoice: Invoice,
    payments: Sequence[Payment],
    payment: Payment,
) -> PaymentApplication:
    """Применение нового платежа к счёту.

    Args:
        invoice: счёт
        payments: уже проведённые платежи по счёту
        payment: новый платёж

    Returns:
        PaymentApplication с обновлённым счётом

    Raises:
        ValueError: если новый или проведённый платёж относится к другому счёту
        PaymentExceedsBalance: если сумма платежей превысит итог счёта
    """
    if payment.invoice_number != invoice.invoice_number:
        raise ValueError(
            f"Payment for invoice {payment.invoice_number} "
            f"cannot be applied to invoice {invoice.invoice_number}"
        )
    for recorded in payments:
        if recorded.invoice_number != invoice.invoice_number:
            raise ValueError(
                f"Recorded payment for invoice {recorded.invoice_number} "
                f"does not belong to invoice {invoice.invoice_number}"
            )

    total_cents = totals_for_invoice(invoice).total_cents
    already_paid = total_paid(payments)

    if already_paid + payment.amount_cents > total_cents:
        remaining = max(total_cents - already_paid, 0)
        logger.warning(
            "Rejected payment of %d on invoice %s: balance due %d",
            payment.amount_cents,
            invoice.invoice_number,
            remaining,
        )
        raise PaymentExceedsBalance(invoice.invoice_number, payment.amount_cents, remaining)

    paid_cents = already_paid + payment.amount_cents
    new_status = _status_after_payment(invoice, paid_cents, total_cents)
    status_changed = new_status != invoice.status

    if status_changed:
        logger.info(
            "Invoice %s status %s -> %s",
            invoice.invoice_number,
            invoice.status.value,
            new_status.value,
        )

    return PaymentApplication(
        invoice=invoice.with_status(new_status),
        payment=payment,
        total_paid_cents=paid_cents,
        balance_due_cents=total_cents - paid_cents,
        status_changed=status_changed,
        previous_status=invoice.status,
    )


def settle_invoice(
    invoice: Invoice,
    payments: Sequence[Payment],
    payment_date: date,
) -> Optional[PaymentApplication]:
    """Отметка счёта как оплаченного.

    Остаток проводится одним платежом способом OTHER.
    Для уже погашенного счёта платёж не создаётся.

    Returns:
        PaymentApplication или None, если остаток уже нулевой
    """
    remaining = balance_due(invoice, payments)
    if remaining == 0:
        logger.debug("Invoice %s already settled", invoice.invoice_number)
        return None

    settlement = Payment(
        invoice_number=invoice.invoice_number,
        amount_cents=remaining,
        payment_date=payment_date,
        method=PaymentMethod.OTHER,
    )
    return apply_payment(invoice, payments, settlement)


# =============================================================================
# СТАТУС
# =============================================================================


def derive_status(
    invoice: Invoice,
    payments: Iterable[Payment],
    today: date,
) -> InvoiceStatus:
    """Актуальный статус счёта на дату.

    Порядок проверок:
    1. Платежи покрывают итог (или счёт уже PAID) → PAID
    2. DRAFT остаётся DRAFT (не отправленный счёт не может быть просрочен)
    3. Срок оплаты истёк → OVERDUE
    4. OVERDUE при перенесённом сроке → SENT
    """
    paid_cents = total_paid(payments)
    total_cents = totals_for_invoice(invoice).total_cents

    if invoice.status == InvoiceStatus.PAID or (paid_cents > 0 and paid_cents >= total_cents):
        return InvoiceStatus.PAID

    if invoice.status == InvoiceStatus.DRAFT:
        return InvoiceStatus.DRAFT

    if invoice.is_past_due(today):
        return InvoiceStatus.OVERDUE

    if invoice.status == InvoiceStatus.OVERDUE:
        return InvoiceStatus.SENT

    return invoice.status
