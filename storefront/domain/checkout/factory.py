"""Order construction helpers."""

from typing import Any, Mapping

from storefront.domain.checkout.order import Order, OrderItem


class OrderFactory:
    @staticmethod
    def create(props: Mapping[str, Any]) -> Order:
        """Build an order from a plain mapping.

        Expected shape::

            {"id": ..., "customer_id": ...,
             "items": [{"id", "name", "price", "product_id", "quantity"}, ...]}
        """
        items = [
            OrderItem(
                id=item["id"],
                name=item["name"],
                price=item["price"],
                product_id=item["product_id"],
                quantity=item["quantity"],
            )
            for item in props.get("items", [])
        ]
        return Order(props.get("id"), props.get("customer_id"), items)
