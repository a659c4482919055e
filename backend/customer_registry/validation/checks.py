# backend/customer_registry/validation/checks.py
"""
Single-value checks used by the customer rule table.

Each check answers one question about one value and never raises on bad
input; callers decide which message to attach to a failed check.
"""
import re
from datetime import date, datetime
from typing import Any, Optional

from email_validator import validate_email, EmailNotValidError
from pydantic import AnyUrl, TypeAdapter, ValidationError

NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")
ALLOWED_URL_SCHEMES = ("http", "https", "ftp")

_url_adapter = TypeAdapter(AnyUrl)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_valid_name(value: str) -> bool:
    return bool(NAME_PATTERN.fullmatch(value))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(value))


def is_valid_email(value: str) -> bool:
    """Syntax-only email check; no DNS or deliverability lookups."""
    try:
        validate_email(value, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def is_valid_url(value: str) -> bool:
    """Absolute http, https or ftp URL with a host."""
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return url.scheme in ALLOWED_URL_SCHEMES and bool(url.host)


def is_strong_password(value: str) -> bool:
    has_upper = any(ch.isupper() for ch in value)
    has_lower = any(ch.islower() for ch in value)
    has_digit = any(ch.isdigit() for ch in value)
    has_symbol = any(not ch.isalnum() for ch in value)
    return has_upper and has_lower and has_digit and has_symbol


def passes_luhn(value: str) -> bool:
    """Luhn checksum over a card number. Spaces and dashes are ignored."""
    digits = value.replace("-", "").replace(" ", "")
    if not digits or not digits.isdigit():
        return False
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def is_past_date(value: Any, today: Optional[date] = None) -> bool:
    day = as_date(value)
    if day is None:
        return False
    return day < (today or date.today())


def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years since date_of_birth, one less if this year's anniversary is still ahead."""
    today = today or date.today()
    date_of_birth = as_date(date_of_birth)
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def email_domain(value: str) -> str:
    return value.split("@", 1)[1].lower() if "@" in value else ""
