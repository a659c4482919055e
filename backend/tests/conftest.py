from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from customer_registry.api import customer_api
from customer_registry.main import app
from customer_registry.repositories.customer_repository import CustomerRepository

TODAY = date(2024, 6, 15)


def make_customer(**overrides):
    data = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@acme.io",
        "age": 30,
        "phone_number": "+15551234567",
        "website": "https://jane.acme.io",
        "date_of_birth": date(1994, 3, 1),
        "salary": Decimal("52000.50"),
        "password": "Passw0rd!",
        "confirm_password": "Passw0rd!",
        "credit_card_number": "4111111111111111",
        "customer_type": "Premium",
        "accept_terms": True,
    }
    data.update(overrides)
    return data


def make_registration(**overrides):
    data = {
        "first_name": "Sam",
        "last_name": "Rivera",
        "email": "sam.rivera@acme.io",
        "date_of_birth": date(1990, 8, 20),
        "password": "Str0ng!Pass",
        "confirm_password": "Str0ng!Pass",
        "accept_terms": True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def repo():
    return CustomerRepository(
        disallowed_email_domains=["tempmail.com", "10minutemail.com", "guerrillamail.com"],
        today=lambda: TODAY,
    )


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(customer_api, "customer_repo", CustomerRepository())
    with TestClient(app) as test_client:
        yield test_client
