from datetime import date

from customer_registry.validation import rules

from conftest import TODAY, make_customer, make_registration

BLOCKED = ["tempmail.com", "10minutemail.com", "guerrillamail.com"]


def validate_customer(data):
    return rules.evaluate(data, rules.customer_field_rules(TODAY), rules.customer_cross_rules())


def validate_registration(data):
    return rules.evaluate(data, rules.registration_field_rules(TODAY),
                          rules.registration_cross_rules(BLOCKED, TODAY))


def test_valid_customer_has_no_errors():
    assert validate_customer(make_customer()) == {}


def test_optional_fields_may_be_missing():
    data = make_customer(phone_number=None, website=None, date_of_birth=None,
                         salary=None, credit_card_number=None)
    assert validate_customer(data) == {}


def test_all_violations_are_reported_together():
    data = make_customer(first_name="J", email="nope", age=12, accept_terms=False)
    errors = validate_customer(data)
    assert set(errors) == {"first_name", "email", "age", "accept_terms"}


def test_one_field_can_report_several_messages():
    errors = validate_customer(make_customer(first_name="1"))
    assert errors["first_name"] == [
        "First name must be between 2 and 20 characters",
        "First name can only contain letters and spaces",
    ]


def test_missing_required_field_reports_only_required_message():
    errors = validate_customer(make_customer(last_name=None))
    assert errors == {"last_name": ["Last name is required"]}


def test_last_name_limit_is_ten_characters():
    assert validate_customer(make_customer(last_name="Abcdefghij")) == {}
    errors = validate_customer(make_customer(last_name="Abcdefghijk"))
    assert errors == {"last_name": ["Last name must be between 2 and 10 characters"]}


def test_email_length_limit():
    long_email = "a" * 60 + "@" + "b" * 40 + ".com"
    errors = validate_customer(make_customer(email=long_email))
    assert "Email cannot exceed 100 characters" in errors["email"]


def test_age_bounds():
    assert validate_customer(make_customer(age=18)) == {}
    assert validate_customer(make_customer(age=120)) == {}
    assert validate_customer(make_customer(age=17)) == {"age": ["Age must be between 18 and 120"]}
    assert validate_customer(make_customer(age=121)) == {"age": ["Age must be between 18 and 120"]}
    assert validate_customer(make_customer(age=None)) == {"age": ["Age must be between 18 and 120"]}


def test_weak_passwords_are_rejected():
    for weak in ("password", "PASSWORD1!"):
        errors = validate_customer(make_customer(password=weak, confirm_password=weak))
        assert rules.STRONG_PASSWORD_MESSAGE in errors["password"]


def test_short_password_reports_length():
    errors = validate_customer(make_customer(password="Pa1!", confirm_password="Pa1!"))
    assert errors["password"] == ["Password must be at least 8 characters long"]


def test_confirmation_must_match():
    errors = validate_customer(make_customer(confirm_password="Passw0rd?"))
    assert errors == {"confirm_password": ["Password and confirmation password do not match"]}


def test_bad_credit_card():
    errors = validate_customer(make_customer(credit_card_number="4111111111111112"))
    assert errors == {"credit_card_number": ["Invalid credit card number"]}


def test_salary_must_be_positive():
    errors = validate_customer(make_customer(salary=0))
    assert errors == {"salary": ["Salary must be greater than 0"]}


def test_date_of_birth_must_be_in_the_past():
    errors = validate_customer(make_customer(date_of_birth=TODAY))
    assert errors == {"date_of_birth": ["Date of birth must be in the past"]}


def test_customer_type_must_be_known():
    assert validate_customer(make_customer(customer_type="Gold")) == {
        "customer_type": ["Invalid customer type"]
    }
    assert validate_customer(make_customer(customer_type=None)) == {
        "customer_type": ["Customer type is required"]
    }


def test_wrongly_typed_values_fail_instead_of_raising():
    errors = validate_customer(make_customer(first_name=42, customer_type=["VIP"]))
    assert "first_name" in errors
    assert errors["customer_type"] == ["Invalid customer type"]


def test_password_containing_name_fails_cross_field_pass():
    errors = validate_customer(make_customer(password="Jane#2024x", confirm_password="Jane#2024x"))
    assert errors == {"password": ["Password cannot contain your first or last name"]}


def test_cross_field_rules_wait_for_clean_field_pass():
    data = make_customer(password="Jane#2024x", confirm_password="Jane#2024x", age=5)
    assert validate_customer(data) == {"age": ["Age must be between 18 and 120"]}


def test_valid_registration_has_no_errors():
    assert validate_registration(make_registration()) == {}


def test_registration_minimum_age_gate():
    assert validate_registration(make_registration(date_of_birth=date(2006, 6, 15))) == {}
    errors = validate_registration(make_registration(date_of_birth=date(2006, 6, 16)))
    assert errors == {"date_of_birth": ["You must be at least 18 years old to register"]}


def test_registration_requires_date_of_birth():
    errors = validate_registration(make_registration(date_of_birth=None))
    assert errors == {"date_of_birth": ["Date of birth is required"]}


def test_registration_rejects_temporary_email_domain():
    errors = validate_registration(make_registration(email="sam@TempMail.com"))
    assert errors == {"email": ["Temporary email addresses are not allowed"]}


def test_registration_rejects_implausible_age():
    errors = validate_registration(make_registration(date_of_birth=date(1900, 1, 1)))
    assert errors == {"date_of_birth": ["Age cannot exceed 120 years"]}


def test_registration_password_may_not_contain_last_name():
    errors = validate_registration(make_registration(password="rivera#X1y", confirm_password="rivera#X1y"))
    assert errors == {"password": ["Password cannot contain your first or last name"]}


def test_registration_mismatch_message():
    errors = validate_registration(make_registration(confirm_password="Other!Pass1"))
    assert errors == {"confirm_password": ["Passwords do not match"]}
