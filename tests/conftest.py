"""Pytest configuration and shared fixtures."""
import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from storefront.domain.customer import Address, Customer, CustomerRepositoryInterface
from storefront.domain.product import Product, ProductRepositoryInterface


@pytest.fixture
def address():
    """A valid address."""
    return Address(street="Street 1", number=123, zip="13330-250", city="São Paulo")


@pytest.fixture
def customer(address):
    """An active-able customer with an address."""
    return Customer("c1", "Customer 1", address)


@pytest.fixture
def product():
    """A plain product."""
    return Product("p1", "Widget", 9.99)


@pytest.fixture
def mock_product_repository():
    """Product repository mock with no stored data."""
    return Mock(spec=ProductRepositoryInterface)


@pytest.fixture
def mock_customer_repository():
    """Customer repository mock with no stored data."""
    return Mock(spec=CustomerRepositoryInterface)


@pytest.fixture
def test_client():
    """FastAPI test client backed by empty repositories."""
    # Import after the environment is set up
    from main import app
    from storefront.infrastructure.api.dependencies import customer_repository, product_repository

    customer_repository.clear()
    product_repository.clear()
    return TestClient(app)
