"""
Domain exceptions raised by the customer store.
"""
from typing import Dict, List


class CustomerRegistryError(Exception):
    """Base class for expected, caller-correctable failures."""
    pass


class CustomerValidationError(CustomerRegistryError):
    """One or more field rules failed. Carries every violation, keyed by field."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation failed for: {fields}")


class DuplicateEmailError(CustomerRegistryError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Customer with email {email} already exists.")


class CustomerNotFoundError(CustomerRegistryError):
    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer with ID {customer_id} not found.")
