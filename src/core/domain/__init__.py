"""
Domain models and value objects.

Contains fundamental domain entities like Client, Invoice, LineItem, Payment.
"""

from src.core.domain.client import Client
from src.core.domain.invoice import Invoice, InvoiceStatus, LineItem
from src.core.domain.payment import Payment, PaymentMethod

__all__ = [
    # Client model
    "Client",
    # Invoice model
    "Invoice",
    "InvoiceStatus",
    "LineItem",
    # Payment model
    "Payment",
    "PaymentMethod",
]
