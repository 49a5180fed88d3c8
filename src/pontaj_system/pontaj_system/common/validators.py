from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} este obligatoriu")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} trebuie să aibă minim {min_len} caractere")
    return value


def is_valid_email(email: str) -> bool:
    return bool(email) and bool(_EMAIL_RE.match(email))


def require_email(email: str) -> str:
    email = (email or "").strip()
    if not is_valid_email(email):
        raise ValidationError("Email invalid")
    return email


def require_month_year(month: object, year: object) -> tuple[int, int]:
    try:
        m = int(month)  # type: ignore[arg-type]
        y = int(year)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError("Luna și anul sunt obligatorii")
    if not 1 <= m <= 12:
        raise ValidationError("Luna trebuie să fie între 1 și 12")
    if y <= 0:
        raise ValidationError("An invalid")
    return m, y
