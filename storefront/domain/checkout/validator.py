"""Validation rules for orders."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.domain.checkout.order import Order
from storefront.domain.shared.validator import SchemaValidator, ValidatorFactory, reject, require


class OrderItemSchema(BaseModel):
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_is_positive(cls, value):
        if value <= 0:
            reject("Item quantity must be greater than zero")
        return value


class OrderSchema(BaseModel):
    model_config = ConfigDict(validate_default=True)

    id: Optional[str] = None
    customer_id: Optional[str] = None
    items: List[OrderItemSchema] = []

    @field_validator("id")
    @classmethod
    def id_is_required(cls, value):
        return require(value, "Id is required")

    @field_validator("customer_id")
    @classmethod
    def customer_id_is_required(cls, value):
        return require(value, "CustomerId is required")

    @field_validator("items")
    @classmethod
    def items_are_required(cls, value):
        if not value:
            reject("Items are required")
        return value


class OrderValidator(SchemaValidator[Order]):
    schema = OrderSchema
    context = "order"

    def fields(self, entity: Order) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "customer_id": entity.customer_id,
            "items": [{"quantity": item.quantity} for item in entity.items],
        }


ValidatorFactory.register(Order, OrderValidator())
