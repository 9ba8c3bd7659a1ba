"""Domain layer - Business entities, value objects and domain events.

This package contains the core domain models and business rules
that are independent of external frameworks and infrastructure.
"""
