"""
Core money modules

Денежные примитивы: НДС, форматирование валюты, проверка email.
Все суммы — целые центы.
"""

# VAT
from src.core.money.vat import (
    DEFAULT_VAT_RATE,
    calculate_total_with_vat,
    calculate_vat,
    resolve_vat_rate,
    round_half_up,
    vat_rate_from_percent,
    vat_rate_to_percent,
)

# Currency
from src.core.money.currency import (
    CENTS_PER_UNIT,
    DEFAULT_CURRENCY_SYMBOL,
    cents_to_major,
    format_currency,
    to_cents,
)

# Email
from src.core.money.email import EMAIL_PATTERN, is_valid_email

__all__ = [
    # VAT — Constants
    "DEFAULT_VAT_RATE",
    # VAT — Functions
    "calculate_total_with_vat",
    "calculate_vat",
    "resolve_vat_rate",
    "round_half_up",
    "vat_rate_from_percent",
    "vat_rate_to_percent",
    # Currency — Constants
    "CENTS_PER_UNIT",
    "DEFAULT_CURRENCY_SYMBOL",
    # Currency — Functions
    "cents_to_major",
    "format_currency",
    "to_cents",
    # Email
    "EMAIL_PATTERN",
    "is_valid_email",
]
