"""
Юнит-тесты для модуля Currency

Проверяет:
1. Форматирование сумм в центах
2. Положение знака минуса (после символа валюты)
3. Произвольные символы валют
4. Конверсию центы <-> major-единицы
"""

from decimal import Decimal

from src.core.money.currency import (
    CENTS_PER_UNIT,
    DEFAULT_CURRENCY_SYMBOL,
    cents_to_major,
    format_currency,
    to_cents,
)


class TestFormatCurrency:
    """Тесты для format_currency"""

    def test_default_symbol(self) -> None:
        """Символ по умолчанию — рэнд"""
        assert DEFAULT_CURRENCY_SYMBOL == "R"
        assert format_currency(10000) == "R100.00"

    def test_basic_amounts(self) -> None:
        """Типовые суммы"""
        assert format_currency(0) == "R0.00"
        assert format_currency(10000) == "R100.00"
        assert format_currency(12345) == "R123.45"

    def test_single_digit_cents(self) -> None:
        """Центы дополняются нулём"""
        assert format_currency(1) == "R0.01"
        assert format_currency(5) == "R0.05"
        assert format_currency(10) == "R0.10"

    def test_large_amounts(self) -> None:
        """Большие суммы без разделителей тысяч"""
        assert format_currency(1000000) == "R10000.00"
        assert format_currency(12345678) == "R123456.78"

    def test_negative_sign_after_symbol(self) -> None:
        """Минус идёт после символа валюты"""
        assert format_currency(-10000) == "R-100.00"
        assert format_currency(-1) == "R-0.01"

    def test_other_symbols(self) -> None:
        """Другие символы валют"""
        assert format_currency(10000, "$") == "$100.00"
        assert format_currency(10000, "€") == "€100.00"
        assert format_currency(10000, "¥") == "¥100.00"

    def test_empty_symbol(self) -> None:
        """Пустой символ — только число"""
        assert format_currency(12345, "") == "123.45"


class TestCentsToMajor:
    """Тесты для cents_to_major"""

    def test_exact_value(self) -> None:
        """Точное Decimal-значение"""
        assert cents_to_major(12345) == Decimal("123.45")
        assert cents_to_major(1) == Decimal("0.01")
        assert cents_to_major(-10000) == Decimal("-100")

    def test_returns_decimal(self) -> None:
        """Результат — Decimal"""
        assert isinstance(cents_to_major(100), Decimal)


class TestToCents:
    """Тесты для to_cents"""

    def test_cents_per_unit(self) -> None:
        """100 центов в major-единице"""
        assert CENTS_PER_UNIT == 100

    def test_basic(self) -> None:
        """Типовые суммы из формы ввода"""
        assert to_cents(100) == 10000
        assert to_cents(123.45) == 12345
        assert to_cents(19.99) == 1999
        assert to_cents(0.01) == 1

    def test_float_noise_absorbed(self) -> None:
        """0.1 + 0.2 → 30 центов"""
        assert to_cents(0.1 + 0.2) == 30

    def test_zero_and_negative(self) -> None:
        """Ноль и отрицательные суммы"""
        assert to_cents(0) == 0
        assert to_cents(-100) == -10000

    def test_format_roundtrip(self) -> None:
        """Введённая сумма отображается без искажений"""
        assert format_currency(to_cents(123.45)) == "R123.45"
