from fastapi import APIRouter, HTTPException, Request, Response, status
from typing import List

from customer_registry.core.exceptions import (
    CustomerNotFoundError,
    CustomerValidationError,
    DuplicateEmailError,
)
from customer_registry.models.customer import Customer, CustomerCreate, CustomerRegistration
from customer_registry.repositories.customer_repository import CustomerRepository

router = APIRouter()
customer_repo = CustomerRepository()

def _validation_failed(err: CustomerValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"errors": err.errors})

def _set_location(request: Request, response: Response, customer_id: int) -> None:
    response.headers["Location"] = str(request.url_for("get_customer_api", customer_id=customer_id))

@router.get("/customers", response_model=List[Customer])
def get_all_customers_api():
    return customer_repo.get_all_customers()

# Handlers are plain def so password hashing runs in the threadpool
# Registered before /customers/{customer_id} routes so "register" is never read as an ID
@router.post("/customers/register", response_model=Customer, status_code=status.HTTP_201_CREATED)
def register_customer_api(registration: CustomerRegistration, request: Request, response: Response):
    """Register a customer from the reduced sign-up form. Age is derived from date of birth."""
    try:
        new_customer = customer_repo.register_customer(registration.model_dump())
    except CustomerValidationError as err:
        raise _validation_failed(err)
    except DuplicateEmailError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err))
    _set_location(request, response, new_customer["id"])
    return new_customer

@router.post("/customers", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer_api(customer: CustomerCreate, request: Request, response: Response):
    try:
        new_customer = customer_repo.create_customer(customer.model_dump())
    except CustomerValidationError as err:
        raise _validation_failed(err)
    except DuplicateEmailError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err))
    _set_location(request, response, new_customer["id"])
    return new_customer

@router.get("/customers/{customer_id}", response_model=Customer)
def get_customer_api(customer_id: int):
    try:
        return customer_repo.get_customer_by_id(customer_id)
    except CustomerNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))

@router.put("/customers/{customer_id}", response_model=Customer)
def update_customer_api(customer_id: int, customer: CustomerCreate):
    """Only first name, last name and email are written; the rest of the payload is validated but not stored."""
    try:
        return customer_repo.update_customer(customer_id, customer.model_dump())
    except CustomerNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))
    except CustomerValidationError as err:
        raise _validation_failed(err)
    except DuplicateEmailError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err))

@router.delete("/customers/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer_api(customer_id: int):
    try:
        customer_repo.delete_customer(customer_id)
    except CustomerNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))
    # HTTP 204 No Content for successful deletion
    return Response(status_code=status.HTTP_204_NO_CONTENT)
