"""
Invoice — Модель счёта и позиций счёта

Immutable Pydantic модели счёта (Invoice) и его позиций (LineItem).
Соответствует схеме contracts/schema/invoice.json.

Суммы позиций — в центах. Итоги счёта (subtotal/VAT/total) не хранятся
в модели: они вычисляются по позициям (src.billing.totals).
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.money.currency import DEFAULT_CURRENCY_SYMBOL
from src.core.money.vat import DEFAULT_VAT_RATE, round_half_up


# =============================================================================
# ENUMS
# =============================================================================


class InvoiceStatus(str, Enum):
    """Статус счёта"""

    DRAFT = "draft"  # Создан, не отправлен
    SENT = "sent"  # Отправлен клиенту (в т.ч. частично оплачен)
    PAID = "paid"  # Оплачен полностью
    OVERDUE = "overdue"  # Просрочен


# =============================================================================
# LINE ITEM MODEL
# =============================================================================


class LineItem(BaseModel):
    """
    Позиция счёта.

    Количество может быть дробным (часы, килограммы), цена — целые центы.
    """

    description: str = Field(..., min_length=1, description="Описание позиции")
    quantity: float = Field(..., gt=0, description="Количество (всегда положительное)")
    unit_price_cents: int = Field(..., ge=0, description="Цена за единицу в центах")

    model_config = {"frozen": True}  # Immutable

    def total_cents(self) -> int:
        """
        Сумма позиции.

        Returns:
            quantity * unit_price_cents, округлённая до целого цента
        """
        return round_half_up(self.quantity * self.unit_price_cents)


# =============================================================================
# INVOICE MODEL
# =============================================================================


class Invoice(BaseModel):
    """
    Модель счёта.

    Immutable модель (frozen=True). Смена статуса создаёт новый экземпляр
    через model_copy(update=...).
    """

    # Идентификация
    invoice_number: str = Field(..., min_length=1, description="Номер счёта (например, 'INV-...')")
    client_id: str = Field(..., min_length=1, description="Идентификатор клиента")

    # Даты
    issue_date: date = Field(..., description="Дата выставления")
    due_date: date = Field(..., description="Срок оплаты")

    # Налог и валюта
    vat_rate: float = Field(
        DEFAULT_VAT_RATE, ge=0, le=1, description="Ставка НДС как дробь (0.15 = 15%)"
    )
    currency_symbol: str = Field(
        DEFAULT_CURRENCY_SYMBOL, min_length=1, description="Символ валюты"
    )

    status: InvoiceStatus = Field(InvoiceStatus.DRAFT, description="Статус счёта")
    notes: str | None = Field(None, description="Примечания")

    items: tuple[LineItem, ...] = Field(..., min_length=1, description="Позиции счёта")

    model_config = {"frozen": True}  # Immutable

    @field_validator("due_date")
    @classmethod
    def validate_due_after_issue(cls, v: date, info) -> date:
        """Проверка, что срок оплаты не раньше даты выставления"""
        if "issue_date" in info.data:
            issue_date = info.data["issue_date"]
            if v < issue_date:
                raise ValueError(f"due_date {v} must not be before issue_date {issue_date}")
        return v

    def subtotal_cents(self) -> int:
        """Сумма всех позиций без НДС (центы)."""
        return sum(item.total_cents() for item in self.items)

    def is_past_due(self, today: date) -> bool:
        """
        Проверка, истёк ли срок оплаты.

        Args:
            today: Текущая дата

        Returns:
            True если today строго позже due_date
        """
        return today > self.due_date

    def with_status(self, status: InvoiceStatus) -> "Invoice":
        """Копия счёта с новым статусом."""
        return self.model_copy(update={"status": status})
