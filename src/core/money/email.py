"""
Email — синтаксическая проверка адресов клиентов и пользователей.

Эвристика, не RFC 5322: local@domain.tld без пробелов и лишних '@'.
Поведение зафиксировано (например, "user@domain" отклоняется из-за
отсутствия точки); более строгая проверка — продуктовое решение.

Пробельные символы — набор ECMAScript `\\s`, а не Python `\\s`:
U+FEFF считается пробелом, управляющие U+001C..U+001F и U+0085 — нет.
"""

import re
from typing import Final


# ECMAScript WhiteSpace + LineTerminator
WHITESPACE_CHARS: Final[str] = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_EMAIL_PART: Final[str] = f"[^{WHITESPACE_CHARS}@]+"

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    f"^{_EMAIL_PART}@{_EMAIL_PART}\\.{_EMAIL_PART}$"
)


def is_valid_email(value: str) -> bool:
    """
    Проверка формата email.

    Args:
        value: Проверяемая строка

    Returns:
        True если строка целиком соответствует EMAIL_PATTERN
    """
    return EMAIL_PATTERN.fullmatch(value) is not None
