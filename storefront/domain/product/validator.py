"""Validation rules for products."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.domain.product.product import Product
from storefront.domain.shared.validator import SchemaValidator, ValidatorFactory, reject, require


class ProductSchema(BaseModel):
    model_config = ConfigDict(validate_default=True)

    id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None

    @field_validator("id")
    @classmethod
    def id_is_required(cls, value):
        return require(value, "Id is required")

    @field_validator("name")
    @classmethod
    def name_is_required(cls, value):
        return require(value, "Name is required")

    @field_validator("price")
    @classmethod
    def price_is_not_negative(cls, value):
        require(value, "Price is required")
        if value < 0:
            reject("Price must be greater than zero")
        return value


class ProductValidator(SchemaValidator[Product]):
    schema = ProductSchema
    context = "product"

    def fields(self, entity: Product) -> Dict[str, Any]:
        return {"id": entity.id, "name": entity.name, "price": entity.base_price}


ValidatorFactory.register(Product, ProductValidator())
