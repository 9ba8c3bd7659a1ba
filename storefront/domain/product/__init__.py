"""Product area: products, their variants and price rules."""
from storefront.domain.product.product import Product, ProductB
from storefront.domain.product import validator  # noqa: F401  registers validators
from storefront.domain.product.events import (
    ProductCreatedEvent,
    SendEmailWhenProductIsCreatedHandler,
    register_product_handlers,
)
from storefront.domain.product.factory import ProductFactory
from storefront.domain.product.repository import ProductRepositoryInterface
from storefront.domain.product.service import ProductService

__all__ = [
    "Product",
    "ProductB",
    "ProductCreatedEvent",
    "ProductFactory",
    "ProductRepositoryInterface",
    "ProductService",
    "SendEmailWhenProductIsCreatedHandler",
    "register_product_handlers",
]
