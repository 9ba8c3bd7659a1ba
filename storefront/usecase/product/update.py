from storefront.core.logging import get_logger
from storefront.domain.product import ProductRepositoryInterface
from storefront.usecase.product.dto import InputUpdateProductDto, OutputUpdateProductDto

logger = get_logger(__name__)


class UpdateProductUseCase:
    """Rename and/or reprice an existing product."""

    def __init__(self, product_repository: ProductRepositoryInterface):
        self.product_repository = product_repository

    def execute(self, input_dto: InputUpdateProductDto) -> OutputUpdateProductDto:
        product = self.product_repository.find(input_dto.id)
        product.change(input_dto.name, input_dto.price)
        self.product_repository.update(product)
        logger.info(f"Product updated: {product.id}", extra={"entity": "product", "entity_id": product.id})
        return OutputUpdateProductDto.from_entity(product)
