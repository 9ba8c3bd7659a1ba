from storefront.domain.checkout.order import Order
from storefront.domain.shared.repository import RepositoryInterface


class OrderRepositoryInterface(RepositoryInterface[Order]):
    """Persistence contract for orders."""
