"""Composition root for the HTTP layer.

Repositories live for the whole process. A fresh EventDispatcher, wired
with the default handlers, is built for every request.
"""
from storefront.domain.customer import CustomerRepositoryInterface, register_customer_handlers
from storefront.domain.events import EventDispatcher
from storefront.domain.product import ProductRepositoryInterface, register_product_handlers
from storefront.infrastructure.repositories import CustomerRepository, ProductRepository

customer_repository = CustomerRepository()
product_repository = ProductRepository()


def get_customer_repository() -> CustomerRepositoryInterface:
    return customer_repository


def get_product_repository() -> ProductRepositoryInterface:
    return product_repository


def get_event_dispatcher() -> EventDispatcher:
    dispatcher = EventDispatcher()
    register_customer_handlers(dispatcher)
    register_product_handlers(dispatcher)
    return dispatcher
