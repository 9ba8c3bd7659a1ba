"""Customer endpoints.

POST /customer, GET /customer, GET /customer/{id}, PUT /customer/{id}
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.core.logging import get_logger, LogTimer
from storefront.domain.customer import CustomerRepositoryInterface
from storefront.domain.events import EventDispatcher
from storefront.domain.shared import DomainException
from storefront.infrastructure.api.dependencies import get_customer_repository, get_event_dispatcher
from storefront.infrastructure.api.errors import to_http_exception
from storefront.usecase.customer import (
    CreateCustomerUseCase,
    FindCustomerUseCase,
    ListCustomerUseCase,
    UpdateCustomerUseCase,
)
from storefront.usecase.customer.dto import (
    AddressDto,
    InputCreateCustomerDto,
    InputFindCustomerDto,
    InputListCustomerDto,
    InputUpdateCustomerDto,
    OutputCreateCustomerDto,
    OutputFindCustomerDto,
    OutputListCustomerDto,
    OutputUpdateCustomerDto,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/customer", tags=["customer"])


class UpdateCustomerRequest(BaseModel):
    name: Optional[str] = None
    address: AddressDto


@router.post("", response_model=OutputCreateCustomerDto)
def create_customer(
    req: InputCreateCustomerDto,
    repository: CustomerRepositoryInterface = Depends(get_customer_repository),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    """Create a customer with an address.

    Example:
        POST /customer
        {"name": "John", "address": {"street": "Street", "number": 123, "zip": "Zip", "city": "City"}}
    """
    with LogTimer(logger, "create_customer"):
        try:
            return CreateCustomerUseCase(repository, dispatcher).execute(req)
        except DomainException as exc:
            raise to_http_exception(exc)


@router.get("", response_model=OutputListCustomerDto)
def list_customers(repository: CustomerRepositoryInterface = Depends(get_customer_repository)):
    with LogTimer(logger, "list_customers"):
        return ListCustomerUseCase(repository).execute(InputListCustomerDto())


@router.get("/{customer_id}", response_model=OutputFindCustomerDto)
def find_customer(customer_id: str, repository: CustomerRepositoryInterface = Depends(get_customer_repository)):
    with LogTimer(logger, f"find_customer:{customer_id}"):
        try:
            return FindCustomerUseCase(repository).execute(InputFindCustomerDto(id=customer_id))
        except DomainException as exc:
            raise to_http_exception(exc)


@router.put("/{customer_id}", response_model=OutputUpdateCustomerDto)
def update_customer(
    customer_id: str,
    req: UpdateCustomerRequest,
    repository: CustomerRepositoryInterface = Depends(get_customer_repository),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    """Rename a customer and/or change its address."""
    with LogTimer(logger, f"update_customer:{customer_id}"):
        try:
            input_dto = InputUpdateCustomerDto(id=customer_id, name=req.name, address=req.address)
            return UpdateCustomerUseCase(repository, dispatcher).execute(input_dto)
        except DomainException as exc:
            raise to_http_exception(exc)
