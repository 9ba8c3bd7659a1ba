"""Building blocks shared by every domain area."""
from storefront.domain.shared.entity import Entity
from storefront.domain.shared.exceptions import (
    DomainException,
    NotFoundError,
    NotificationError,
    PreconditionError,
)
from storefront.domain.shared.notification import Notification, NotificationErrorProps
from storefront.domain.shared.repository import RepositoryInterface
from storefront.domain.shared.validator import SchemaValidator, Validator, ValidatorFactory

__all__ = [
    "DomainException",
    "Entity",
    "NotFoundError",
    "Notification",
    "NotificationError",
    "NotificationErrorProps",
    "PreconditionError",
    "RepositoryInterface",
    "SchemaValidator",
    "Validator",
    "ValidatorFactory",
]
