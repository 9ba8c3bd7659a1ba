from storefront.usecase.product.create import CreateProductUseCase
from storefront.usecase.product.find import FindProductUseCase
from storefront.usecase.product.list_all import ListProductUseCase
from storefront.usecase.product.update import UpdateProductUseCase

__all__ = ["CreateProductUseCase", "FindProductUseCase", "ListProductUseCase", "UpdateProductUseCase"]
