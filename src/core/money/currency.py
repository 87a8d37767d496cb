"""
Currency — Форматирование и конверсия денежных сумм

Суммы хранятся в центах (int). В major-единицы (рэнды, доллары)
переводятся только для отображения или при вводе из формы.
Промежуточные значения — Decimal, без float-арифметики над деньгами.
"""

from decimal import Decimal
from typing import Final

from src.core.money.vat import round_half_up


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символ валюты по умолчанию (южноафриканский рэнд)
DEFAULT_CURRENCY_SYMBOL: Final[str] = "R"

# Количество минорных единиц в major-единице
CENTS_PER_UNIT: Final[int] = 100


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def cents_to_major(amount_cents: int) -> Decimal:
    """
    Центы → major-единицы (точное значение).

    Args:
        amount_cents: Сумма в центах

    Returns:
        Decimal с двумя знаками после запятой (12345 → Decimal('123.45'))
    """
    return Decimal(amount_cents).scaleb(-2)


def to_cents(major_amount: float) -> int:
    """
    Major-единицы → центы.

    Используется для сумм, введённых пользователем (цена позиции, платёж).
    Округление — то же правило, что и для НДС.

    Args:
        major_amount: Сумма в major-единицах (например, 123.45)

    Returns:
        Сумма в центах (12345)
    """
    return round_half_up(major_amount * CENTS_PER_UNIT)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_currency(
    amount_cents: int, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> str:
    """
    Форматирование суммы для отображения.

    Символ валюты — префикс, ровно два знака после запятой.
    Знак минуса идёт после символа: -10000 → "R-100.00".

    Args:
        amount_cents: Сумма в центах
        currency_symbol: Символ валюты (default: "R")

    Returns:
        Отформатированная строка

    Examples:
        >>> format_currency(12345)
        'R123.45'
        >>> format_currency(10000, "$")
        '$100.00'
        >>> format_currency(-10000)
        'R-100.00'
    """
    major = cents_to_major(amount_cents)
    return f"{currency_symbol}{major:.2f}"
