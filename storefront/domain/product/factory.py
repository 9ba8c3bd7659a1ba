"""Product construction helpers."""

import uuid

from storefront.domain.product.product import Product, ProductB

PRODUCT_TYPES = {
    "a": Product,
    "b": ProductB,
}


class ProductFactory:
    """Builds validated products of a given type with fresh ids."""

    @staticmethod
    def create(type: str, name: str, price: float) -> Product:
        """Create a product.

        Args:
            type: ``"a"`` for a regular product, ``"b"`` for the double-priced variant
            name: Product name
            price: Base price

        Raises:
            ValueError: If ``type`` is unknown
            NotificationError: If the product fails validation
        """
        product_class = PRODUCT_TYPES.get(type)
        if product_class is None:
            raise ValueError("Product type not supported")
        return product_class(str(uuid.uuid4()), name, price)
