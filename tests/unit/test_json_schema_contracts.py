"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/enum/format)
- Межполевые правила (due_date >= issue_date)
- Интеграция с Pydantic моделями
"""

from datetime import date

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    ClientValidator,
    InvoiceValidator,
    PaymentValidator,
    SchemaLoader,
    validate_client,
    validate_invoice,
    validate_payment,
)
from src.core.domain import Client, Invoice, LineItem, Payment, PaymentMethod
from src.core.money import is_valid_email


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_client():
    """Валидный client для тестирования."""
    return {
        "name": "Thandi Nkosi",
        "email": "thandi@example.co.za",
        "phone": "+27 21 555 0100",
        "address": "12 Long Street, Cape Town",
        "company": "Nkosi Design",
        "vat_number": "4123456789",
    }


@pytest.fixture
def valid_invoice():
    """Валидный invoice для тестирования."""
    return {
        "invoice_number": "INV-1700000000000",
        "client_id": "client-1",
        "issue_date": "2026-01-01",
        "due_date": "2026-01-31",
        "vat_rate": 0.15,
        "currency_symbol": "R",
        "status": "sent",
        "notes": None,
        "items": [
            {"description": "Consulting", "quantity": 2, "unit_price_cents": 5000},
            {"description": "Hours", "quantity": 1.5, "unit_price_cents": 333},
        ],
    }


@pytest.fixture
def valid_payment():
    """Валидный payment для тестирования."""
    return {
        "invoice_number": "INV-1700000000000",
        "amount_cents": 11500,
        "payment_date": "2026-01-15",
        "method": "eft",
        "reference": "FNB-00123",
        "notes": None,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["client", "invoice", "payment"])
    def test_schemas_load(self, schema_name):
        """Все схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name
        assert schema["type"] == "object"

    def test_schema_cached(self):
        """Повторная загрузка возвращает закэшированную схему"""
        loader = SchemaLoader()
        assert loader.load_schema("invoice") is loader.load_schema("invoice")

    def test_unknown_schema(self):
        """Неизвестная схема"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# CLIENT CONTRACT
# =============================================================================


class TestClientContract:
    """Тесты client контракта"""

    def test_valid(self, valid_client):
        validate_client(valid_client)

    def test_minimal(self):
        """Только обязательные поля"""
        validate_client({"name": "Sipho", "email": "sipho@example.com"})

    def test_missing_email(self, valid_client):
        del valid_client["email"]
        with pytest.raises(ValidationError):
            validate_client(valid_client)

    def test_email_pattern(self, valid_client):
        """Email проверяется через is_valid_email"""
        valid_client["email"] = "user@domain"
        assert ClientValidator().is_valid(valid_client) is False

    def test_additional_properties_rejected(self, valid_client):
        valid_client["password"] = "secret"
        with pytest.raises(ValidationError):
            validate_client(valid_client)

    def test_email_trailing_newline_rejected(self, valid_client):
        """Перевод строки после адреса не проходит, как и в модели Client"""
        valid_client["email"] = "user@test.com\n"
        assert ClientValidator().is_valid(valid_client) is False
        with pytest.raises(ValidationError, match="client-email"):
            validate_client(valid_client)

    @pytest.mark.parametrize(
        "email,expected",
        [
            ("user\ufeff@example.com", False),
            ("user\u00a0@example.com", False),
            ("us\x1cer@example.com", True),
        ],
    )
    def test_email_whitespace_matches_model(self, valid_client, email, expected):
        """Контракт и is_valid_email одинаково трактуют пробельные символы"""
        valid_client["email"] = email
        assert ClientValidator().is_valid(valid_client) is expected
        assert is_valid_email(email) is expected


# =============================================================================
# INVOICE CONTRACT
# =============================================================================


class TestInvoiceContract:
    """Тесты invoice контракта"""

    def test_valid(self, valid_invoice):
        validate_invoice(valid_invoice)

    @pytest.mark.parametrize(
        "field", ["invoice_number", "client_id", "issue_date", "due_date", "items"]
    )
    def test_required_fields(self, valid_invoice, field):
        del valid_invoice[field]
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_empty_items(self, valid_invoice):
        valid_invoice["items"] = []
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_fractional_cents_rejected(self, valid_invoice):
        valid_invoice["items"][0]["unit_price_cents"] = 49.99
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_zero_quantity_rejected(self, valid_invoice):
        valid_invoice["items"][0]["quantity"] = 0
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_vat_rate_as_percent_rejected(self, valid_invoice):
        """Ставка в контракте — дробь, а не проценты"""
        valid_invoice["vat_rate"] = 15
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_unknown_status(self, valid_invoice):
        valid_invoice["status"] = "pending"
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_date_format(self, valid_invoice):
        valid_invoice["issue_date"] = "01/01/2026"
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    @pytest.mark.parametrize("value", ["2026-13-45", "2026-02-30", "2026-01-31\n"])
    def test_impossible_date_rejected(self, valid_invoice, value):
        """Строка формы YYYY-MM-DD, но не календарная дата"""
        valid_invoice["due_date"] = value
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_due_before_issue_rejected(self, valid_invoice):
        """due_date раньше issue_date отклоняется, как и в модели Invoice"""
        valid_invoice["issue_date"] = "2026-02-01"
        valid_invoice["due_date"] = "2026-01-01"
        with pytest.raises(ValidationError, match="must not be before issue_date") as exc_info:
            validate_invoice(valid_invoice)
        assert list(exc_info.value.path) == ["due_date"]
        assert InvoiceValidator().is_valid(valid_invoice) is False

    def test_due_on_issue_date_accepted(self, valid_invoice):
        valid_invoice["due_date"] = valid_invoice["issue_date"]
        assert InvoiceValidator().is_valid(valid_invoice) is True

    def test_iter_errors_reports_all(self, valid_invoice):
        """iter_errors возвращает все нарушения"""
        valid_invoice["status"] = "pending"
        valid_invoice["vat_rate"] = 15
        errors = list(InvoiceValidator().iter_errors(valid_invoice))
        assert len(errors) == 2

    def test_iter_errors_includes_date_order(self, valid_invoice):
        """Ошибки схемы и правило дат сообщаются вместе"""
        valid_invoice["status"] = "pending"
        valid_invoice["due_date"] = "2025-12-31"
        errors = list(InvoiceValidator().iter_errors(valid_invoice))
        assert [e.validator for e in errors] == ["enum", "dueDateOrder"]


# =============================================================================
# PAYMENT CONTRACT
# =============================================================================


class TestPaymentContract:
    """Тесты payment контракта"""

    def test_valid(self, valid_payment):
        validate_payment(valid_payment)

    @pytest.mark.parametrize("amount", [0, -100, 10.5])
    def test_amount_positive_integer(self, valid_payment, amount):
        valid_payment["amount_cents"] = amount
        with pytest.raises(ValidationError):
            validate_payment(valid_payment)

    def test_unknown_method(self, valid_payment):
        valid_payment["method"] = "bitcoin"
        assert PaymentValidator().is_valid(valid_payment) is False

    def test_impossible_payment_date(self, valid_payment):
        valid_payment["payment_date"] = "2026-13-45"
        assert PaymentValidator().is_valid(valid_payment) is False


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Сериализованные модели соответствуют контрактам"""

    def test_client_model(self):
        client = Client(name="Sipho", email="sipho@example.com")
        validate_client(client.model_dump(mode="json"))

    def test_invoice_model(self):
        invoice = Invoice(
            invoice_number="INV-1",
            client_id="client-1",
            issue_date=date(2026, 1, 1),
            due_date=date(2026, 1, 31),
            items=[LineItem(description="Consulting", quantity=2, unit_price_cents=5000)],
        )
        validate_invoice(invoice.model_dump(mode="json"))

    def test_payment_model(self):
        payment = Payment(
            invoice_number="INV-1",
            amount_cents=11500,
            payment_date=date(2026, 1, 15),
            method=PaymentMethod.PAYFAST,
        )
        validate_payment(payment.model_dump(mode="json"))

    def test_contract_payload_builds_model(self, valid_invoice):
        """Валидный payload строит модель"""
        validate_invoice(valid_invoice)
        invoice = Invoice.model_validate(valid_invoice)
        assert invoice.subtotal_cents() == 10500  # 10000 + round(499.5)

    def test_due_before_issue_rejected_by_both(self, valid_invoice):
        """Контракт и модель отклоняют один и тот же payload"""
        valid_invoice["issue_date"] = "2026-02-01"
        valid_invoice["due_date"] = "2026-01-01"
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)
        with pytest.raises(PydanticValidationError):
            Invoice.model_validate(valid_invoice)
