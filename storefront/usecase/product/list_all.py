from storefront.domain.product import ProductRepositoryInterface
from storefront.usecase.product.dto import InputListProductDto, OutputListProductDto, ProductDto


class ListProductUseCase:
    def __init__(self, product_repository: ProductRepositoryInterface):
        self.product_repository = product_repository

    def execute(self, input_dto: InputListProductDto) -> OutputListProductDto:
        products = self.product_repository.find_all()
        return OutputListProductDto(products=[ProductDto.from_entity(product) for product in products])
