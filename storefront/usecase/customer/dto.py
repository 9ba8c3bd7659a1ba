"""Input and output DTOs for customer use cases."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.domain.customer import Address, Customer


class AddressDto(BaseModel):
    street: str
    number: int
    zip: str
    city: str

    def to_value_object(self) -> Address:
        return Address(street=self.street, number=self.number, zip=self.zip, city=self.city)

    @classmethod
    def from_value_object(cls, address: Optional[Address]) -> Optional["AddressDto"]:
        if address is None:
            return None
        return cls(**address.to_dict())


class CustomerDto(BaseModel):
    id: str
    name: str
    address: Optional[AddressDto] = None

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerDto":
        return cls(
            id=customer.id,
            name=customer.name,
            address=AddressDto.from_value_object(customer.address),
        )


class InputCreateCustomerDto(BaseModel):
    name: Optional[str] = None
    address: AddressDto

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John",
                "address": {"street": "Street", "number": 123, "zip": "Zip", "city": "City"}
            }
        }
    )


class OutputCreateCustomerDto(CustomerDto):
    pass


class InputFindCustomerDto(BaseModel):
    id: str


class OutputFindCustomerDto(CustomerDto):
    pass


class InputListCustomerDto(BaseModel):
    pass


class OutputListCustomerDto(BaseModel):
    customers: List[CustomerDto]


class InputUpdateCustomerDto(BaseModel):
    id: str
    name: Optional[str] = None
    address: AddressDto


class OutputUpdateCustomerDto(CustomerDto):
    pass
