"""Customer area: the Customer entity and its Address value object."""
from storefront.domain.customer.value_object import Address
from storefront.domain.customer.customer import Customer
from storefront.domain.customer import validator  # noqa: F401  registers validators
from storefront.domain.customer.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    LogAgainWhenCustomerIsCreatedHandler,
    LogWhenCustomerAddressChangedHandler,
    LogWhenCustomerIsCreatedHandler,
    register_customer_handlers,
)
from storefront.domain.customer.factory import CustomerFactory
from storefront.domain.customer.repository import CustomerRepositoryInterface

__all__ = [
    "Address",
    "Customer",
    "CustomerAddressChangedEvent",
    "CustomerCreatedEvent",
    "CustomerFactory",
    "CustomerRepositoryInterface",
    "LogAgainWhenCustomerIsCreatedHandler",
    "LogWhenCustomerAddressChangedHandler",
    "LogWhenCustomerIsCreatedHandler",
    "register_customer_handlers",
]
