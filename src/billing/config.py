"""Конфигурация биллинга (ставка НДС, валюта, подписи)."""

from dataclasses import dataclass

from src.core.money.currency import DEFAULT_CURRENCY_SYMBOL
from src.core.money.vat import DEFAULT_VAT_RATE


@dataclass(frozen=True)
class BillingConfig:
    """Конфигурация биллинга.

    - default_vat_rate: ставка для счетов без явной ставки
    - currency_symbol: символ валюты для отображения
    - vat_label: подпись строки НДС в сводке (фиксированный текст,
      не зависит от фактической ставки счёта)
    """
    default_vat_rate: float = DEFAULT_VAT_RATE
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    vat_label: str = "VAT (15%)"


DEFAULT_BILLING_CONFIG = BillingConfig()
