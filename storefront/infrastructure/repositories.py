"""In-memory repository implementations.

Entities are kept in insertion order, keyed by id. Each repository instance
owns its own store.
"""
from typing import Dict, Generic, List, TypeVar

from storefront.core.logging import get_logger
from storefront.domain.checkout import Order, OrderRepositoryInterface
from storefront.domain.customer import Customer, CustomerRepositoryInterface
from storefront.domain.product import Product, ProductRepositoryInterface
from storefront.domain.shared import Entity, NotFoundError

logger = get_logger(__name__)

E = TypeVar("E", bound=Entity)


class InMemoryRepository(Generic[E]):
    """Dict-backed storage shared by the concrete repositories below."""

    entity_name = "Entity"

    def __init__(self) -> None:
        self._store: Dict[str, E] = {}

    def create(self, entity: E) -> None:
        self._store[entity.id] = entity
        logger.debug(
            f"{self.entity_name} stored",
            extra={"entity": self.entity_name.lower(), "entity_id": entity.id},
        )

    def update(self, entity: E) -> None:
        if entity.id not in self._store:
            raise NotFoundError(f"{self.entity_name} not found", entity_id=entity.id)
        self._store[entity.id] = entity

    def find(self, id: str) -> E:
        try:
            return self._store[id]
        except KeyError:
            raise NotFoundError(f"{self.entity_name} not found", entity_id=id) from None

    def find_all(self) -> List[E]:
        return list(self._store.values())

    def clear(self) -> None:
        self._store.clear()


class CustomerRepository(InMemoryRepository[Customer], CustomerRepositoryInterface):
    entity_name = "Customer"


class ProductRepository(InMemoryRepository[Product], ProductRepositoryInterface):
    entity_name = "Product"


class OrderRepository(InMemoryRepository[Order], OrderRepositoryInterface):
    entity_name = "Order"
