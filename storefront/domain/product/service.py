from typing import Iterable, List

from storefront.domain.product.product import Product


class ProductService:
    @staticmethod
    def increase_price(products: Iterable[Product], percentage: float) -> List[Product]:
        """Raise every product's base price by ``percentage`` percent, in place."""
        products = list(products)
        for product in products:
            product.change_price(product.base_price * percentage / 100 + product.base_price)
        return products
