#!/usr/bin/env python3
"""
Quick script to add sample customers to a running Customer Registry API
"""

import os
import sys

import requests

# Configuration
API_BASE = os.getenv("API_BASE_URL", "http://localhost:8000/api/v1")
TIMEOUT = 10

def create_sample_customer(customer_data):
    """Create a sample customer"""
    response = requests.post(f"{API_BASE}/customers", json=customer_data, timeout=TIMEOUT)
    if response.status_code == 201:
        return response.json()
    if response.status_code == 409:
        print(f"Skipping {customer_data['email']}: already registered")
    else:
        print(f"Failed to create customer: {response.status_code} - {response.text}")
    return None

def register_sample_customer(registration_data):
    """Register a customer through the sign-up endpoint"""
    response = requests.post(f"{API_BASE}/customers/register", json=registration_data, timeout=TIMEOUT)
    if response.status_code == 201:
        return response.json()
    print(f"Failed to register customer: {response.status_code} - {response.text}")
    return None

SAMPLE_CUSTOMERS = [
    {
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice.johnson@example.com",
        "age": 34,
        "phone_number": "+14155550101",
        "website": "https://alice.example.com",
        "date_of_birth": "1991-04-12",
        "salary": "85000.00",
        "password": "Sunny#Day7",
        "confirm_password": "Sunny#Day7",
        "credit_card_number": "4111111111111111",
        "customer_type": "Premium",
        "accept_terms": True,
    },
    {
        "first_name": "Bob",
        "last_name": "Smith",
        "email": "bob.smith@example.com",
        "age": 52,
        "phone_number": "+12125550102",
        "password": "Harbor!42x",
        "confirm_password": "Harbor!42x",
        "customer_type": "Corporate",
        "accept_terms": True,
    },
    {
        "first_name": "Carol",
        "last_name": "Davis",
        "email": "carol.davis@example.com",
        "age": 27,
        "password": "Maple&Leaf9",
        "confirm_password": "Maple&Leaf9",
        "customer_type": "Regular",
        "accept_terms": True,
    },
]

SAMPLE_REGISTRATION = {
    "first_name": "Dana",
    "last_name": "Lee",
    "email": "dana.lee@example.com",
    "date_of_birth": "1988-09-30",
    "password": "Quiet$River3",
    "confirm_password": "Quiet$River3",
    "accept_terms": True,
}

def main():
    print(f"Adding sample customers to {API_BASE} ...")

    try:
        response = requests.get(f"{API_BASE}/customers", timeout=TIMEOUT)
    except requests.RequestException as err:
        print(f"Could not reach the API: {err}")
        return 1

    existing = response.json() if response.status_code == 200 else []
    print(f"Found {len(existing)} existing customers")

    created = [c for c in (create_sample_customer(data) for data in SAMPLE_CUSTOMERS) if c]
    for customer in created:
        print(f"Created customer {customer['id']}: {customer['first_name']} {customer['last_name']}")

    registered = register_sample_customer(SAMPLE_REGISTRATION)
    if registered:
        print(f"Registered customer {registered['id']} (age {registered['age']})")

    print(f"Done: {len(created) + (1 if registered else 0)} customers added")
    return 0

if __name__ == "__main__":
    sys.exit(main())
