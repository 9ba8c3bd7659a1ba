from storefront.domain.product.product import Product
from storefront.domain.shared.repository import RepositoryInterface


class ProductRepositoryInterface(RepositoryInterface[Product]):
    """Persistence contract for products."""
