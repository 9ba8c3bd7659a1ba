from storefront.domain.product import ProductRepositoryInterface
from storefront.usecase.product.dto import InputFindProductDto, OutputFindProductDto


class FindProductUseCase:
    def __init__(self, product_repository: ProductRepositoryInterface):
        self.product_repository = product_repository

    def execute(self, input_dto: InputFindProductDto) -> OutputFindProductDto:
        product = self.product_repository.find(input_dto.id)
        return OutputFindProductDto.from_entity(product)
