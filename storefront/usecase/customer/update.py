from typing import Optional

from storefront.core.logging import get_logger
from storefront.domain.customer import CustomerAddressChangedEvent, CustomerRepositoryInterface
from storefront.domain.events import EventDispatcher
from storefront.usecase.customer.dto import InputUpdateCustomerDto, OutputUpdateCustomerDto

logger = get_logger(__name__)


class UpdateCustomerUseCase:
    """Rename a customer and move it to a new address.

    CustomerAddressChangedEvent is notified only when the address differs
    from the stored one.
    """

    def __init__(
        self,
        customer_repository: CustomerRepositoryInterface,
        event_dispatcher: Optional[EventDispatcher] = None,
    ):
        self.customer_repository = customer_repository
        self.event_dispatcher = event_dispatcher

    def execute(self, input_dto: InputUpdateCustomerDto) -> OutputUpdateCustomerDto:
        customer = self.customer_repository.find(input_dto.id)
        address = input_dto.address.to_value_object()
        address_changed = customer.address != address

        customer.change_name(input_dto.name)
        customer.change_address(address)
        self.customer_repository.update(customer)
        logger.info(f"Customer updated: {customer.id}", extra={"entity": "customer", "entity_id": customer.id})

        if address_changed and self.event_dispatcher is not None:
            self.event_dispatcher.notify(
                CustomerAddressChangedEvent(
                    payload={"id": customer.id, "name": customer.name, "address": str(address)}
                )
            )
        return OutputUpdateCustomerDto.from_entity(customer)
