"""Product endpoints.

POST /product, GET /product, GET /product/{id}, PUT /product/{id}
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.core.logging import get_logger, LogTimer
from storefront.domain.events import EventDispatcher
from storefront.domain.product import ProductRepositoryInterface
from storefront.domain.shared import DomainException
from storefront.infrastructure.api.dependencies import get_event_dispatcher, get_product_repository
from storefront.infrastructure.api.errors import to_http_exception
from storefront.usecase.product import (
    CreateProductUseCase,
    FindProductUseCase,
    ListProductUseCase,
    UpdateProductUseCase,
)
from storefront.usecase.product.dto import (
    InputCreateProductDto,
    InputFindProductDto,
    InputListProductDto,
    InputUpdateProductDto,
    OutputCreateProductDto,
    OutputFindProductDto,
    OutputListProductDto,
    OutputUpdateProductDto,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/product", tags=["product"])


class UpdateProductRequest(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = None


@router.post("", response_model=OutputCreateProductDto)
def create_product(
    req: InputCreateProductDto,
    repository: ProductRepositoryInterface = Depends(get_product_repository),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    """Create a product of type "a" or "b".

    Example:
        POST /product
        {"type": "a", "name": "Widget", "price": 9.99}
    """
    with LogTimer(logger, "create_product"):
        try:
            return CreateProductUseCase(repository, dispatcher).execute(req)
        except (DomainException, ValueError) as exc:
            raise to_http_exception(exc)


@router.get("", response_model=OutputListProductDto)
def list_products(repository: ProductRepositoryInterface = Depends(get_product_repository)):
    """List every stored product in insertion order."""
    with LogTimer(logger, "list_products"):
        return ListProductUseCase(repository).execute(InputListProductDto())


@router.get("/{product_id}", response_model=OutputFindProductDto)
def find_product(product_id: str, repository: ProductRepositoryInterface = Depends(get_product_repository)):
    with LogTimer(logger, f"find_product:{product_id}"):
        try:
            return FindProductUseCase(repository).execute(InputFindProductDto(id=product_id))
        except DomainException as exc:
            raise to_http_exception(exc)


@router.put("/{product_id}", response_model=OutputUpdateProductDto)
def update_product(
    product_id: str,
    req: UpdateProductRequest,
    repository: ProductRepositoryInterface = Depends(get_product_repository),
):
    with LogTimer(logger, f"update_product:{product_id}"):
        try:
            input_dto = InputUpdateProductDto(id=product_id, name=req.name, price=req.price)
            return UpdateProductUseCase(repository).execute(input_dto)
        except DomainException as exc:
            raise to_http_exception(exc)
