"""Domain exceptions.

Two disjoint error channels exist in the domain:

* ``NotificationError``: raised once at an entity's construction (or
  re-validation) boundary, carrying every rule violation the validator found.
* ``PreconditionError``: raised by a business method invoked on an entity
  that lacks required state. Single message, never aggregated.

``NotFoundError`` is raised by repositories when an identifier is unknown.
"""

from typing import Any, Dict, List, Optional

from storefront.domain.shared.notification import NotificationErrorProps


class DomainException(Exception):
    """Base exception for all domain-level errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class NotificationError(DomainException):
    """Aggregated validation failure raised when a notification holds errors."""

    def __init__(self, errors: List[NotificationErrorProps]):
        self.errors = list(errors)
        message = ",".join(f"{error.context}: {error.message}" for error in self.errors)
        super().__init__(message, details={"errors": [error.to_dict() for error in self.errors]})

    @property
    def messages(self) -> List[str]:
        """Bare messages of every collected error, in order."""
        return [error.message for error in self.errors]


class PreconditionError(DomainException):
    """A business method was invoked on an entity missing required state."""


class NotFoundError(DomainException):
    """A requested entity does not exist in the repository."""

    def __init__(self, message: str, entity_id: Optional[str] = None):
        super().__init__(message, details={"id": entity_id} if entity_id is not None else None)
        self.entity_id = entity_id
