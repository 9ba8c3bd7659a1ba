"""Address value object."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from storefront.domain.shared.exceptions import NotificationError
from storefront.domain.shared.validator import ValidatorFactory


@dataclass(frozen=True)
class Address:
    """Immutable postal address, compared by value.

    Attributes:
        street: Street name
        number: House number, must be positive
        zip: Postal code
        city: City name
    """

    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self) -> None:
        errors = ValidatorFactory.create(Address).validate(self)
        if errors:
            raise NotificationError(errors)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
