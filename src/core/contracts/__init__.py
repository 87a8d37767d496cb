"""
Contract Validation Module

Модуль для валидации JSON контрактов (client, invoice, payment).
"""

from .validators import (
    CLIENT_EMAIL_FORMAT,
    FORMAT_CHECKER,
    ClientValidator,
    ContractValidator,
    InvoiceValidator,
    PaymentValidator,
    SchemaLoader,
    validate_client,
    validate_invoice,
    validate_payment,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ClientValidator",
    "InvoiceValidator",
    "PaymentValidator",
    # Formats
    "FORMAT_CHECKER",
    "CLIENT_EMAIL_FORMAT",
    # Functions
    "validate_client",
    "validate_invoice",
    "validate_payment",
]
