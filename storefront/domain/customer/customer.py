"""Customer entity."""

from typing import Optional

from storefront.domain.customer.value_object import Address
from storefront.domain.shared.entity import Entity
from storefront.domain.shared.exceptions import PreconditionError


class Customer(Entity):
    """A buyer. Must hold an address before it can be activated."""

    def __init__(self, id: str, name: str, address: Optional[Address] = None):
        super().__init__(id)
        self._name = name
        self._address = address
        self._active = False
        self._reward_points = 0.0
        self._validate()

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @property
    def reward_points(self) -> float:
        return self._reward_points

    def change_name(self, name: str) -> None:
        self._change("_name", name)

    def change_address(self, address: Address) -> None:
        if address is None:
            raise PreconditionError("Address is required")
        self._address = address

    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if self._address is None:
            raise PreconditionError("Address is mandatory to activate a customer")
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def add_reward_points(self, points: float) -> None:
        self._reward_points += points
