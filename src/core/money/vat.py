"""
VAT — Расчёт НДС в минорных единицах

Все суммы передаются как int (центы). Ставка НДС — десятичная дробь
(0.15 = 15%). Результаты расчёта всегда целые центы.

Модуль предоставляет:
- calculate_vat: сумма НДС от базы
- calculate_total_with_vat: база + НДС
- конверсию ставок percent <-> fraction
- единое правило округления (round_half_up)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. calculate_vat(0, r) == 0 и calculate_vat(a, 0) == 0
2. calculate_total_with_vat(a, r) == a + calculate_vat(a, r)
3. Знак суммы сохраняется: calculate_vat(-a, r) == -calculate_vat(a, r)
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Optional


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ставка НДС по умолчанию (ЮАР, 15%)
DEFAULT_VAT_RATE: Final[float] = 0.15


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половины — от нуля.

    Decimal(value) точно представляет исходный float, поэтому "половина"
    определяется по фактическому значению произведения, без повторной
    ошибки округления.

    Args:
        value: Значение в центах (может быть дробным)

    Returns:
        Целое число центов

    Examples:
        >>> round_half_up(4999.95)
        5000
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -3
    """
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


# =============================================================================
# НДС
# =============================================================================


def calculate_vat(amount_cents: int, vat_rate: float = DEFAULT_VAT_RATE) -> int:
    """
    Сумма НДС от базы.

    Формула: round(amount_cents * vat_rate)

    Ставка не валидируется (допускаются значения вне [0, 1]).
    Отрицательная база даёт отрицательный НДС (кредит-ноты, возвраты).

    Args:
        amount_cents: База в центах
        vat_rate: Ставка НДС как дробь (default: 0.15)

    Returns:
        Сумма НДС в центах

    Examples:
        >>> calculate_vat(10000)
        1500
        >>> calculate_vat(33333)
        5000
        >>> calculate_vat(-10000)
        -1500
    """
    return round_half_up(amount_cents * vat_rate)


def calculate_total_with_vat(
    amount_cents: int, vat_rate: float = DEFAULT_VAT_RATE
) -> int:
    """
    Итог с НДС: база + calculate_vat(база).

    Args:
        amount_cents: База в центах
        vat_rate: Ставка НДС как дробь (default: 0.15)

    Returns:
        Итог в центах
    """
    vat_cents = calculate_vat(amount_cents, vat_rate)
    return amount_cents + vat_cents


# =============================================================================
# СТАВКИ
# =============================================================================


def vat_rate_from_percent(percent: float) -> float:
    """
    Конверсия ставки из процентов (форма ввода, 0-100) в дробь.

    Args:
        percent: Ставка в процентах (например, 15)

    Returns:
        Ставка как дробь (например, 0.15)
    """
    return percent / 100.0


def vat_rate_to_percent(vat_rate: float) -> float:
    """Конверсия ставки из дроби в проценты (0.15 → 15.0)."""
    return round(vat_rate * 100.0, 6)


def resolve_vat_rate(
    vat_rate: Optional[float], default: float = DEFAULT_VAT_RATE
) -> float:
    """
    Эффективная ставка для счёта.

    None → ставка по умолчанию. Явный 0 сохраняется (нулевая ставка
    для экспортных счетов), а не подменяется на default.

    Args:
        vat_rate: Ставка счёта или None
        default: Ставка по умолчанию

    Returns:
        Ставка как дробь
    """
    if vat_rate is None:
        return default
    return vat_rate
