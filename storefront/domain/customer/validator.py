"""Validation rules for customers and addresses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.domain.customer.customer import Customer
from storefront.domain.customer.value_object import Address
from storefront.domain.shared.validator import SchemaValidator, ValidatorFactory, reject, require


class CustomerSchema(BaseModel):
    model_config = ConfigDict(validate_default=True)

    id: Optional[str] = None
    name: Optional[str] = None

    @field_validator("id")
    @classmethod
    def id_is_required(cls, value):
        return require(value, "Id is required")

    @field_validator("name")
    @classmethod
    def name_is_required(cls, value):
        return require(value, "Name is required")


class AddressSchema(BaseModel):
    model_config = ConfigDict(validate_default=True)

    street: Optional[str] = None
    number: Optional[int] = None
    zip: Optional[str] = None
    city: Optional[str] = None

    @field_validator("street")
    @classmethod
    def street_is_required(cls, value):
        return require(value, "Street is required")

    @field_validator("number")
    @classmethod
    def number_is_positive(cls, value):
        if value is None or value <= 0:
            reject("Number must be greater than zero")
        return value

    @field_validator("zip")
    @classmethod
    def zip_is_required(cls, value):
        return require(value, "Zip is required")

    @field_validator("city")
    @classmethod
    def city_is_required(cls, value):
        return require(value, "City is required")


class CustomerValidator(SchemaValidator[Customer]):
    schema = CustomerSchema
    context = "customer"

    def fields(self, entity: Customer) -> Dict[str, Any]:
        return {"id": entity.id, "name": entity.name}


class AddressValidator(SchemaValidator[Address]):
    schema = AddressSchema
    context = "address"

    def fields(self, entity: Address) -> Dict[str, Any]:
        return entity.to_dict()


ValidatorFactory.register(Customer, CustomerValidator())
ValidatorFactory.register(Address, AddressValidator())
