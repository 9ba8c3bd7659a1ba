"""Checkout area: orders and their items."""
from storefront.domain.checkout.order import Order, OrderItem
from storefront.domain.checkout import validator  # noqa: F401  registers validators
from storefront.domain.checkout.factory import OrderFactory
from storefront.domain.checkout.repository import OrderRepositoryInterface
from storefront.domain.checkout.service import OrderService

__all__ = ["Order", "OrderFactory", "OrderItem", "OrderRepositoryInterface", "OrderService"]
