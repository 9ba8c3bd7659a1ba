"""Order aggregate."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List

from storefront.domain.shared.entity import Entity


@dataclass(frozen=True)
class OrderItem:
    """A product line inside an order."""

    id: str
    name: str
    price: float
    product_id: str
    quantity: int

    def total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Order(Entity):
    """A customer's order. Needs at least one item with a positive quantity."""

    def __init__(self, id: str, customer_id: str, items: Iterable[OrderItem]):
        super().__init__(id)
        self._customer_id = customer_id
        self._items: List[OrderItem] = list(items)
        self._validate()

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> List[OrderItem]:
        return list(self._items)

    def add_item(self, item: OrderItem) -> None:
        self._change("_items", self._items + [item])

    def total(self) -> float:
        return sum(item.total() for item in self._items)
