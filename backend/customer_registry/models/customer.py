# backend/customer_registry/models/customer.py
from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

class CustomerType(str, Enum):
    REGULAR = "Regular"
    PREMIUM = "Premium"
    VIP = "VIP"
    CORPORATE = "Corporate"

# Input models keep every field loosely typed and optional so that the
# rule table, not request parsing, reports what is missing or malformed.
class CustomerCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    phone_number: Optional[str] = None
    website: Optional[str] = None
    date_of_birth: Optional[date] = None
    salary: Optional[Decimal] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    credit_card_number: Optional[str] = None
    customer_type: Optional[str] = None
    accept_terms: bool = False

class CustomerRegistration(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    date_of_birth: Optional[date] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    accept_terms: bool = False

class Customer(BaseModel):
    """A stored customer as returned by the API. Password material is never included."""
    id: int
    first_name: str
    last_name: str
    email: str
    age: int
    phone_number: Optional[str] = None
    website: Optional[str] = None
    date_of_birth: Optional[date] = None
    salary: Optional[Decimal] = None
    credit_card_number: Optional[str] = None
    customer_type: CustomerType
    accept_terms: bool

    class Config:
        from_attributes = True
