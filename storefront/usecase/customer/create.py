from typing import Optional

from storefront.core.logging import get_logger
from storefront.domain.customer import CustomerCreatedEvent, CustomerFactory, CustomerRepositoryInterface
from storefront.domain.events import EventDispatcher
from storefront.usecase.customer.dto import InputCreateCustomerDto, OutputCreateCustomerDto

logger = get_logger(__name__)


class CreateCustomerUseCase:
    """Create a customer with an address and announce it with CustomerCreatedEvent."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryInterface,
        event_dispatcher: Optional[EventDispatcher] = None,
    ):
        self.customer_repository = customer_repository
        self.event_dispatcher = event_dispatcher

    def execute(self, input_dto: InputCreateCustomerDto) -> OutputCreateCustomerDto:
        customer = CustomerFactory.create_with_address(
            input_dto.name,
            input_dto.address.to_value_object(),
        )
        self.customer_repository.create(customer)
        logger.info(f"Customer created: {customer.id}", extra={"entity": "customer", "entity_id": customer.id})

        if self.event_dispatcher is not None:
            self.event_dispatcher.notify(
                CustomerCreatedEvent(payload={"id": customer.id, "name": customer.name})
            )
        return OutputCreateCustomerDto.from_entity(customer)
