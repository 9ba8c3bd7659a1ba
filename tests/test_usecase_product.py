"""Unit tests for product use cases, mostly with mocked repositories."""
import pytest
from unittest.mock import Mock

from storefront.domain.events import EventDispatcher
from storefront.domain.product import Product, ProductCreatedEvent, ProductFactory
from storefront.domain.shared import NotFoundError, NotificationError
from storefront.infrastructure.repositories import ProductRepository
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
)


class TestCreateProductUseCase:
    """Test creating products."""

    def test_create_product(self, mock_product_repository):
        usecase = CreateProductUseCase(mock_product_repository)
        input_dto = InputCreateProductDto(type="a", name="Widget", price=9.99)

        output = usecase.execute(input_dto)

        assert output.id
        assert output.name == "Widget"
        assert output.price == 9.99
        mock_product_repository.create.assert_called_once()
        stored = mock_product_repository.create.call_args.args[0]
        assert isinstance(stored, Product)
        assert stored.id == output.id

    def test_missing_name_raises(self, mock_product_repository):
        usecase = CreateProductUseCase(mock_product_repository)

        with pytest.raises(NotificationError, match="Name is required"):
            usecase.execute(InputCreateProductDto(type="a", name="", price=10))

        mock_product_repository.create.assert_not_called()

    def test_negative_price_raises(self, mock_product_repository):
        usecase = CreateProductUseCase(mock_product_repository)

        with pytest.raises(NotificationError, match="Price must be greater than zero"):
            usecase.execute(InputCreateProductDto(type="a", name="Widget", price=-10))

    def test_unsupported_type_raises(self, mock_product_repository):
        usecase = CreateProductUseCase(mock_product_repository)

        with pytest.raises(ValueError, match="Product type not supported"):
            usecase.execute(InputCreateProductDto(name="Widget", price=10))

    def test_product_created_event_is_dispatched(self, mock_product_repository):
        dispatcher = EventDispatcher()
        handler = Mock()
        dispatcher.register(ProductCreatedEvent.event_name, handler)
        usecase = CreateProductUseCase(mock_product_repository, dispatcher)

        output = usecase.execute(InputCreateProductDto(type="a", name="Widget", price=9.99))

        handler.assert_called_once()
        event = handler.call_args.args[0]
        assert isinstance(event, ProductCreatedEvent)
        assert event.payload == {"id": output.id, "name": "Widget", "price": 9.99}

    def test_handler_error_propagates(self, mock_product_repository):
        dispatcher = EventDispatcher()
        dispatcher.register(ProductCreatedEvent.event_name, Mock(side_effect=RuntimeError("boom")))
        usecase = CreateProductUseCase(mock_product_repository, dispatcher)

        with pytest.raises(RuntimeError, match="boom"):
            usecase.execute(InputCreateProductDto(type="a", name="Widget", price=9.99))

        # Persistence already happened; nothing is rolled back
        mock_product_repository.create.assert_called_once()


class TestFindProductUseCase:
    def test_find_product(self, mock_product_repository, product):
        mock_product_repository.find.return_value = product
        usecase = FindProductUseCase(mock_product_repository)

        output = usecase.execute(InputFindProductDto(id="p1"))

        assert output.model_dump() == {"id": "p1", "name": "Widget", "price": 9.99}
        mock_product_repository.find.assert_called_once_with("p1")

    def test_product_not_found(self, mock_product_repository):
        mock_product_repository.find.side_effect = NotFoundError("Product not found")
        usecase = FindProductUseCase(mock_product_repository)

        with pytest.raises(NotFoundError, match="Product not found"):
            usecase.execute(InputFindProductDto(id="missing"))


class TestListProductUseCase:
    def test_list_products(self, mock_product_repository):
        product1 = ProductFactory.create("a", "Product 1", 1)
        product2 = ProductFactory.create("a", "Product 2", 2)
        mock_product_repository.find_all.return_value = [product1, product2]
        usecase = ListProductUseCase(mock_product_repository)

        output = usecase.execute(InputListProductDto())

        assert len(output.products) == 2
        assert output.products[0].id == product1.id
        assert output.products[0].name == "Product 1"
        assert output.products[1].price == 2


class TestUpdateProductUseCase:
    def test_update_product(self, mock_product_repository):
        product = ProductFactory.create("a", "Product 1", 10)
        mock_product_repository.find.return_value = product
        usecase = UpdateProductUseCase(mock_product_repository)
        input_dto = InputUpdateProductDto(id=product.id, name="Product Updated", price=20)

        output = usecase.execute(input_dto)

        assert output.model_dump() == input_dto.model_dump()
        mock_product_repository.update.assert_called_once_with(product)

    def test_update_with_invalid_price_raises(self, mock_product_repository):
        product = ProductFactory.create("a", "Product 1", 10)
        mock_product_repository.find.return_value = product
        usecase = UpdateProductUseCase(mock_product_repository)

        with pytest.raises(NotificationError, match="Price must be greater than zero"):
            usecase.execute(InputUpdateProductDto(id=product.id, name="Product 1", price=-1))

        mock_product_repository.update.assert_not_called()
        assert product.price == 10

    def test_rejected_update_leaves_stored_product_unchanged(self):
        repository = ProductRepository()
        product = Product("p1", "Widget", 10)
        repository.create(product)
        usecase = UpdateProductUseCase(repository)

        with pytest.raises(NotificationError, match="Price must be greater than zero"):
            usecase.execute(InputUpdateProductDto(id="p1", name="Renamed", price=-1))

        stored = repository.find("p1")
        assert stored.name == "Widget"
        assert stored.price == 10
