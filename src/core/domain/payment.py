"""
Payment — Модель платежа по счёту

Immutable Pydantic модель платежа.
Соответствует схеме contracts/schema/payment.json.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class PaymentMethod(str, Enum):
    """Способ оплаты"""

    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"
    EFT = "eft"
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    PAYFAST = "payfast"
    OTHER = "other"  # В т.ч. ручная отметка "оплачен"


# =============================================================================
# PAYMENT MODEL
# =============================================================================


class Payment(BaseModel):
    """
    Модель платежа.

    Сумма — строго положительные целые центы. Возвраты платежами
    не моделируются.
    """

    invoice_number: str = Field(..., min_length=1, description="Номер оплачиваемого счёта")
    amount_cents: int = Field(..., gt=0, description="Сумма платежа в центах")
    payment_date: date = Field(..., description="Дата платежа")
    method: PaymentMethod = Field(..., description="Способ оплаты")
    reference: str | None = Field(None, description="Референс (номер транзакции)")
    notes: str | None = Field(None, description="Примечания")

    model_config = {"frozen": True}  # Immutable
