"""
Client — Модель клиента

Immutable Pydantic модель клиента, которому выставляются счета.
Соответствует схеме contracts/schema/client.json.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.money.email import is_valid_email


class Client(BaseModel):
    """
    Модель клиента.

    Email проверяется той же эвристикой, что и на форме ввода
    (is_valid_email), чтобы API и UI принимали одни и те же адреса.
    """

    name: str = Field(..., min_length=1, description="Имя клиента")
    email: str = Field(..., description="Email для отправки счетов")
    phone: str | None = Field(None, description="Телефон")
    address: str | None = Field(None, description="Адрес")
    company: str | None = Field(None, description="Компания")
    vat_number: str | None = Field(None, description="VAT-номер клиента")

    model_config = {"frozen": True}  # Immutable

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Проверка формата email"""
        if not is_valid_email(v):
            raise ValueError(f"Invalid email address: {v!r}")
        return v

    def display_name(self) -> str:
        """
        Имя для отображения в списке счетов.

        Returns:
            "Name (Company)" если компания задана, иначе "Name"
        """
        if self.company:
            return f"{self.name} ({self.company})"
        return self.name
