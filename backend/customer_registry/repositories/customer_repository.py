import copy
import logging
import threading
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Optional

from customer_registry.core.config import get_settings
from customer_registry.core.exceptions import (
    CustomerNotFoundError,
    CustomerValidationError,
    DuplicateEmailError,
)
from customer_registry.core.security import get_password_hash
from customer_registry.models.customer import CustomerType
from customer_registry.validation import checks, rules

logger = logging.getLogger(__name__)

# Fields copied from a validated payload into the stored record.
# Password material is stored as a hash only and confirm_password is dropped.
STORED_FIELDS = (
    "first_name", "last_name", "email", "age", "phone_number", "website",
    "date_of_birth", "salary", "credit_card_number", "customer_type", "accept_terms",
)
# The update path only ever overwrites these.
UPDATABLE_FIELDS = ("first_name", "last_name", "email")


class CustomerRepository:
    """
    In-memory customer store.

    Every operation holds a single lock, so identifier assignment and the
    email uniqueness check are atomic with the write that follows them.
    Validation and password hashing happen before the lock is taken.
    Records are kept in insertion order and handed out as copies.
    """

    def __init__(self, disallowed_email_domains: Optional[Iterable[str]] = None,
                 today: Optional[Callable[[], date]] = None):
        if disallowed_email_domains is None:
            disallowed_email_domains = get_settings()["disallowed_email_domains"]
        self.disallowed_email_domains = frozenset(d.lower() for d in disallowed_email_domains)
        self._today = today or date.today
        self._lock = threading.RLock()
        self._customers: List[Dict[str, Any]] = []
        self._next_id = 1

    def _find(self, customer_id: int) -> Optional[Dict[str, Any]]:
        for customer in self._customers:
            if customer["id"] == customer_id:
                return customer
        return None

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        wanted = email.lower()
        return any(
            c["email"].lower() == wanted for c in self._customers if c["id"] != exclude_id
        )

    def _validate(self, data: Dict[str, Any], field_rules, cross_rules, action: str) -> None:
        errors = rules.evaluate(data, field_rules, cross_rules)
        if errors:
            logger.warning("Invalid customer data submitted for %s: %s", action, sorted(errors))
            raise CustomerValidationError(errors)

    def _store(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Assign the next identifier and append. Caller must hold the lock."""
        if self._email_taken(record["email"]):
            logger.warning("Customer with email %s already exists", record["email"])
            raise DuplicateEmailError(record["email"])
        record["id"] = self._next_id
        self._next_id += 1
        self._customers.append(record)
        return copy.deepcopy(record)

    def get_all_customers(self) -> List[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._customers)

    def get_customer_by_id(self, customer_id: int) -> Dict[str, Any]:
        with self._lock:
            customer = self._find(customer_id)
            if customer is None:
                logger.warning("Customer with ID %s not found", customer_id)
                raise CustomerNotFoundError(customer_id)
            return copy.deepcopy(customer)

    def create_customer(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a full customer payload and store it."""
        today = self._today()
        self._validate(data, rules.customer_field_rules(today), rules.customer_cross_rules(), "create")

        record = {field: data.get(field) for field in STORED_FIELDS}
        record["customer_type"] = CustomerType(data["customer_type"])
        record["password_hash"] = get_password_hash(data["password"])

        with self._lock:
            created = self._store(record)
        logger.info("Created new customer with ID %s", created["id"])
        return created

    def update_customer(self, customer_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a full customer payload, then overwrite first name, last name
        and email of an existing customer. Every other stored field is kept.
        """
        with self._lock:
            if self._find(customer_id) is None:
                logger.warning("Customer with ID %s not found for update", customer_id)
                raise CustomerNotFoundError(customer_id)

        today = self._today()
        self._validate(data, rules.customer_field_rules(today), rules.customer_cross_rules(), "update")

        with self._lock:
            existing = self._find(customer_id)
            if existing is None:
                logger.warning("Customer with ID %s not found for update", customer_id)
                raise CustomerNotFoundError(customer_id)
            if self._email_taken(data["email"], exclude_id=customer_id):
                logger.warning("Customer with email %s already exists", data["email"])
                raise DuplicateEmailError(data["email"])
            for field in UPDATABLE_FIELDS:
                existing[field] = data[field]
            updated = copy.deepcopy(existing)
        logger.info("Updated customer with ID %s", customer_id)
        return updated

    def delete_customer(self, customer_id: int) -> None:
        with self._lock:
            customer = self._find(customer_id)
            if customer is None:
                logger.warning("Customer with ID %s not found for deletion", customer_id)
                raise CustomerNotFoundError(customer_id)
            self._customers.remove(customer)
        logger.info("Deleted customer with ID %s", customer_id)

    def register_customer(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a registration payload, derive the age and store a Regular customer."""
        today = self._today()
        self._validate(
            data,
            rules.registration_field_rules(today),
            rules.registration_cross_rules(self.disallowed_email_domains, today),
            "registration",
        )

        record = {field: None for field in STORED_FIELDS}
        record.update(
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            date_of_birth=checks.as_date(data["date_of_birth"]),
            age=checks.calculate_age(data["date_of_birth"], today),
            customer_type=CustomerType.REGULAR,
            accept_terms=data["accept_terms"],
            password_hash=get_password_hash(data["password"]),
        )

        with self._lock:
            created = self._store(record)
        logger.info("Registered new customer with ID %s", created["id"])
        return created
