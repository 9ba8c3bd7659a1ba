"""Storefront - customers, products and orders in a layered DDD backend.

Layers:
- domain: entities, value objects, validators, domain events
- usecase: application services with pydantic DTOs
- infrastructure: repositories and the FastAPI routers
- core: settings and logging
"""
__version__ = "1.0.0"
