"""Product entities."""

from storefront.domain.shared.entity import Entity


class Product(Entity):
    """A sellable item with a name and a non-negative price."""

    def __init__(self, id: str, name: str, price: float):
        super().__init__(id)
        self._name = name
        self._price = price
        self._validate()

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    @property
    def base_price(self) -> float:
        """Stored price, before any variant-specific adjustment."""
        return self._price

    def change_name(self, name: str) -> None:
        self._change("_name", name)

    def change_price(self, price: float) -> None:
        self._change("_price", price)

    def change(self, name: str, price: float) -> None:
        """Rename and reprice together; neither change applies unless both are valid."""
        self._change_many({"_name": name, "_price": price})


class ProductB(Product):
    """Product variant sold at twice its base price."""

    @property
    def price(self) -> float:
        return self._price * 2
