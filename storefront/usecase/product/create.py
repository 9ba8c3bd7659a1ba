from typing import Optional

from storefront.core.logging import get_logger
from storefront.domain.events import EventDispatcher
from storefront.domain.product import ProductCreatedEvent, ProductFactory, ProductRepositoryInterface
from storefront.usecase.product.dto import InputCreateProductDto, OutputCreateProductDto

logger = get_logger(__name__)


class CreateProductUseCase:
    """Create a product, store it and announce it with ProductCreatedEvent."""

    def __init__(
        self,
        product_repository: ProductRepositoryInterface,
        event_dispatcher: Optional[EventDispatcher] = None,
    ):
        self.product_repository = product_repository
        self.event_dispatcher = event_dispatcher

    def execute(self, input_dto: InputCreateProductDto) -> OutputCreateProductDto:
        product = ProductFactory.create(input_dto.type, input_dto.name, input_dto.price)
        self.product_repository.create(product)
        logger.info(f"Product created: {product.id}", extra={"entity": "product", "entity_id": product.id})

        output = OutputCreateProductDto.from_entity(product)
        if self.event_dispatcher is not None:
            self.event_dispatcher.notify(ProductCreatedEvent(payload=output.model_dump()))
        return output
