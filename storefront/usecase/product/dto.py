"""Input and output DTOs for product use cases."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.domain.product import Product


class ProductDto(BaseModel):
    id: str
    name: str
    price: float

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDto":
        return cls(id=product.id, name=product.name, price=product.price)


class InputCreateProductDto(BaseModel):
    """Fields are optional so that missing values reach domain validation."""
    type: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"type": "a", "name": "Widget", "price": 9.99}}
    )


class OutputCreateProductDto(ProductDto):
    pass


class InputFindProductDto(BaseModel):
    id: str


class OutputFindProductDto(ProductDto):
    pass


class InputListProductDto(BaseModel):
    pass


class OutputListProductDto(BaseModel):
    products: List[ProductDto]


class InputUpdateProductDto(BaseModel):
    id: str
    name: Optional[str] = None
    price: Optional[float] = None


class OutputUpdateProductDto(ProductDto):
    pass
