"""Customer construction helpers."""

import uuid

from storefront.domain.customer.customer import Customer
from storefront.domain.customer.value_object import Address


class CustomerFactory:
    """Builds validated customers with freshly generated ids."""

    @staticmethod
    def create(name: str) -> Customer:
        return Customer(str(uuid.uuid4()), name)

    @staticmethod
    def create_with_address(name: str, address: Address) -> Customer:
        return Customer(str(uuid.uuid4()), name, address)
