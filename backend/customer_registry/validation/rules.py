# backend/customer_registry/validation/rules.py
"""
Rule tables for customer payloads.

Validation runs in two passes. Field rules are checked first and every
violation is collected, so one field can report several messages. Cross-field
rules see the whole record and only run once the field pass is clean.
"""
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional

from customer_registry.models.customer import CustomerType
from customer_registry.validation import checks

MIN_AGE = 18
MAX_AGE = 120
MIN_PASSWORD_LENGTH = 8
MAX_EMAIL_LENGTH = 100

STRONG_PASSWORD_MESSAGE = (
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "one digit, and one special character"
)


class FieldRule(NamedTuple):
    field: str
    check: Callable[[Any, Mapping[str, Any]], bool]
    message: str
    # Most rules leave missing values to the field's "required" rule
    skip_blank: bool = True


class CrossFieldRule(NamedTuple):
    field: str
    check: Callable[[Mapping[str, Any]], bool]
    message: str


def _value(predicate: Callable[[Any], bool]) -> Callable[[Any, Mapping[str, Any]], bool]:
    return lambda value, record: predicate(value)


def _required(field: str, message: str) -> FieldRule:
    return FieldRule(field, _value(lambda value: not checks.is_blank(value)), message, skip_blank=False)


def _length(field: str, minimum: int, maximum: int, message: str) -> FieldRule:
    return FieldRule(field, _value(lambda value: minimum <= len(value) <= maximum), message)


def _name_rules(field: str, label: str, max_length: int) -> List[FieldRule]:
    return [
        _required(field, f"{label} is required"),
        _length(field, 2, max_length, f"{label} must be between 2 and {max_length} characters"),
        FieldRule(field, _value(checks.is_valid_name), f"{label} can only contain letters and spaces"),
    ]


def _email_rules() -> List[FieldRule]:
    return [
        _required("email", "Email is required"),
        FieldRule("email", _value(checks.is_valid_email), "Invalid email format"),
        FieldRule("email", _value(lambda value: len(value) <= MAX_EMAIL_LENGTH),
                  f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"),
    ]


def _password_rules(mismatch_message: str) -> List[FieldRule]:
    return [
        _required("password", "Password is required"),
        FieldRule("password", _value(lambda value: len(value) >= MIN_PASSWORD_LENGTH),
                  f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"),
        FieldRule("password", _value(checks.is_strong_password), STRONG_PASSWORD_MESSAGE),
        _required("confirm_password", "Please confirm your password"),
        FieldRule("confirm_password", lambda value, record: value == record.get("password"), mismatch_message),
    ]


def _terms_rule() -> FieldRule:
    return FieldRule("accept_terms", _value(lambda value: value is True),
                     "You must accept the terms and conditions", skip_blank=False)


def _is_age_in_range(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_AGE <= value <= MAX_AGE


def _is_positive_amount(value: Any) -> bool:
    try:
        return Decimal(str(value)) > 0
    except ArithmeticError:
        return False


def _is_customer_type(value: Any) -> bool:
    if isinstance(value, CustomerType):
        return True
    return value in {member.value for member in CustomerType}


def _password_excludes_names(record: Mapping[str, Any]) -> bool:
    password = (record.get("password") or "").lower()
    names = [record.get("first_name"), record.get("last_name")]
    return not any(name and name.lower() in password for name in names)


PASSWORD_NAME_RULE = CrossFieldRule(
    "password", _password_excludes_names, "Password cannot contain your first or last name"
)


def customer_field_rules(today: Optional[date] = None) -> List[FieldRule]:
    """Field rules for a full customer payload (create and full update)."""
    return [
        *_name_rules("first_name", "First name", 20),
        *_name_rules("last_name", "Last name", 10),
        *_email_rules(),
        FieldRule("age", _value(_is_age_in_range), f"Age must be between {MIN_AGE} and {MAX_AGE}", skip_blank=False),
        FieldRule("phone_number", _value(checks.is_valid_phone),
                  "Phone number must be in international format (e.g., +1234567890)"),
        FieldRule("website", _value(checks.is_valid_url), "Invalid URL format"),
        FieldRule("date_of_birth", _value(lambda value: checks.is_past_date(value, today)),
                  "Date of birth must be in the past"),
        FieldRule("salary", _value(_is_positive_amount), "Salary must be greater than 0"),
        *_password_rules("Password and confirmation password do not match"),
        FieldRule("credit_card_number", _value(checks.passes_luhn), "Invalid credit card number"),
        _required("customer_type", "Customer type is required"),
        FieldRule("customer_type", _value(_is_customer_type), "Invalid customer type"),
        _terms_rule(),
    ]


def customer_cross_rules() -> List[CrossFieldRule]:
    return [PASSWORD_NAME_RULE]


def registration_field_rules(today: Optional[date] = None) -> List[FieldRule]:
    """Field rules for the reduced registration payload."""
    def old_enough(value: Any) -> bool:
        day = checks.as_date(value)
        return day is not None and checks.calculate_age(day, today) >= MIN_AGE

    return [
        *_name_rules("first_name", "First name", 20),
        *_name_rules("last_name", "Last name", 10),
        *_email_rules(),
        _required("date_of_birth", "Date of birth is required"),
        FieldRule("date_of_birth", _value(lambda value: checks.is_past_date(value, today)),
                  "Date of birth must be in the past"),
        FieldRule("date_of_birth", _value(old_enough), f"You must be at least {MIN_AGE} years old to register"),
        *_password_rules("Passwords do not match"),
        _terms_rule(),
    ]


def registration_cross_rules(disallowed_domains: Iterable[str],
                             today: Optional[date] = None) -> List[CrossFieldRule]:
    blocked: FrozenSet[str] = frozenset(domain.lower() for domain in disallowed_domains)

    def allowed_domain(record: Mapping[str, Any]) -> bool:
        return checks.email_domain(record["email"]) not in blocked

    def plausible_age(record: Mapping[str, Any]) -> bool:
        return checks.calculate_age(record["date_of_birth"], today) <= MAX_AGE

    return [
        CrossFieldRule("email", allowed_domain, "Temporary email addresses are not allowed"),
        CrossFieldRule("date_of_birth", plausible_age, f"Age cannot exceed {MAX_AGE} years"),
        PASSWORD_NAME_RULE,
    ]


def evaluate(record: Mapping[str, Any],
             field_rules: Iterable[FieldRule],
             cross_rules: Iterable[CrossFieldRule] = ()) -> Dict[str, List[str]]:
    """Run both passes over record and return field -> messages for every violation."""
    errors: Dict[str, List[str]] = defaultdict(list)
    for rule in field_rules:
        value = record.get(rule.field)
        if rule.skip_blank and checks.is_blank(value):
            continue
        try:
            passed = rule.check(value, record)
        except (TypeError, ValueError):
            passed = False
        if not passed:
            errors[rule.field].append(rule.message)

    if errors:
        return dict(errors)

    for rule in cross_rules:
        if not rule.check(record):
            errors[rule.field].append(rule.message)
    return dict(errors)
