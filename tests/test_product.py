"""Unit tests for products, the product factory and price rules."""
import pytest

from storefront.domain.product import Product, ProductB, ProductFactory, ProductService
from storefront.domain.product.validator import ProductValidator
from storefront.domain.shared import NotificationError, ValidatorFactory


class TestProduct:
    """Test product construction and validation."""

    def test_missing_id_raises(self):
        with pytest.raises(NotificationError, match="product: Id is required"):
            Product("", "Product 1", 100)

    def test_missing_name_raises(self):
        with pytest.raises(NotificationError, match="product: Name is required"):
            Product("123", "", 100)

    def test_negative_price_raises(self):
        with pytest.raises(NotificationError, match="product: Price must be greater than zero"):
            Product("123", "Name", -1)

    def test_missing_price_raises(self):
        with pytest.raises(NotificationError, match="product: Price is required"):
            Product("123", "Name", None)

    def test_every_violation_is_reported(self):
        with pytest.raises(NotificationError) as exc_info:
            Product("p1", "", -10)

        assert set(exc_info.value.messages) == {"Name is required", "Price must be greater than zero"}

    def test_all_three_violations_are_reported(self):
        with pytest.raises(NotificationError) as exc_info:
            Product("", "", -10)

        assert str(exc_info.value) == (
            "product: Id is required,"
            "product: Name is required,"
            "product: Price must be greater than zero"
        )

    def test_zero_price_is_allowed(self):
        assert Product("p1", "Free sample", 0).price == 0

    def test_valid_product_keeps_fields(self):
        product = Product("p1", "Widget", 9.99)

        assert product.id == "p1"
        assert product.name == "Widget"
        assert product.price == 9.99

    def test_rejected_change_leaves_notification_empty(self, product):
        with pytest.raises(NotificationError, match="Name is required"):
            product.change_name("")

        assert product.name == "Widget"
        assert not product.notification.has_errors()

    def test_change_applies_name_and_price_together(self, product):
        product.change("Gadget", 20)

        assert product.name == "Gadget"
        assert product.price == 20

    def test_change_with_invalid_price_keeps_old_name(self, product):
        with pytest.raises(NotificationError, match="Price must be greater than zero"):
            product.change("Gadget", -1)

        assert product.name == "Widget"
        assert product.price == 9.99
        assert not product.notification.has_errors()

    def test_change_name(self, product):
        product.change_name("Product 2")

        assert product.name == "Product 2"

    def test_change_price(self, product):
        product.change_price(150)

        assert product.price == 150

    def test_change_price_to_negative_raises_and_keeps_old_price(self, product):
        with pytest.raises(NotificationError, match="Price must be greater than zero"):
            product.change_price(-5)

        assert product.price == 9.99


class TestProductB:
    """Test the double-priced product variant."""

    def test_price_is_doubled(self):
        product = ProductB("b1", "Product B", 10)

        assert product.price == 20
        assert product.base_price == 10

    def test_uses_product_validator(self):
        assert isinstance(ValidatorFactory.create(ProductB), ProductValidator)

        with pytest.raises(NotificationError, match="Name is required"):
            ProductB("b1", "", 10)

    def test_missing_price_raises(self):
        with pytest.raises(NotificationError, match="Price is required"):
            ProductB("b1", "Product B", None)


class TestValidatorFactory:
    """Test validator lookup."""

    def test_unknown_type_raises(self):
        class Unregistered:
            pass

        with pytest.raises(LookupError):
            ValidatorFactory.create(Unregistered)

    def test_validator_returns_errors_without_raising(self, product):
        product._name = ""

        errors = ValidatorFactory.create(Product).validate(product)

        assert [error.message for error in errors] == ["Name is required"]
        assert errors[0].context == "product"


class TestProductFactory:
    """Test product factory."""

    def test_create_product_type_a(self):
        product = ProductFactory.create("a", "Product A", 1)

        assert product.id
        assert product.name == "Product A"
        assert product.price == 1
        assert type(product) is Product

    def test_create_product_type_b(self):
        product = ProductFactory.create("b", "Product B", 1)

        assert product.name == "Product B"
        assert product.price == 2
        assert type(product) is ProductB

    def test_unsupported_type_raises(self):
        with pytest.raises(ValueError, match="Product type not supported"):
            ProductFactory.create("c", "Product C", 1)

    def test_invalid_product_raises(self):
        with pytest.raises(NotificationError, match="Name is required"):
            ProductFactory.create("a", "", 1)

    def test_type_b_without_price_raises(self):
        with pytest.raises(NotificationError, match="Price is required"):
            ProductFactory.create("b", "Product B", None)


class TestProductService:
    """Test product price rules."""

    def test_increase_price_of_all_products(self):
        product1 = Product("product1", "Product 1", 10)
        product2 = Product("product2", "Product 2", 20)

        ProductService.increase_price([product1, product2], 100)

        assert product1.price == 20
        assert product2.price == 40

    def test_increase_price_uses_base_price_for_variant(self):
        product = ProductB("b1", "Product B", 10)

        ProductService.increase_price([product], 50)

        assert product.base_price == 15
        assert product.price == 30
