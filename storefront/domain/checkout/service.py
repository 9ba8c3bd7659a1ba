"""Domain services spanning orders and customers."""

import uuid
from typing import Iterable, Sequence

from storefront.core.logging import get_logger
from storefront.domain.checkout.order import Order, OrderItem
from storefront.domain.customer.customer import Customer

logger = get_logger(__name__)


class OrderService:
    @staticmethod
    def total(orders: Iterable[Order]) -> float:
        return sum(order.total() for order in orders)

    @staticmethod
    def place_order(customer: Customer, items: Sequence[OrderItem]) -> Order:
        """Create an order for ``customer`` and credit reward points.

        The customer earns half of the order total in reward points.

        Raises:
            ValueError: If ``items`` is empty
        """
        if not items:
            raise ValueError("Order must have at least one item")
        order = Order(str(uuid.uuid4()), customer.id, items)
        customer.add_reward_points(order.total() / 2)
        logger.info(
            f"Order placed for customer {customer.id}",
            extra={"entity": "order", "entity_id": order.id},
        )
        return order
