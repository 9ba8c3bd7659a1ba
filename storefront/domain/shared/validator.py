"""Validators and the validator registry.

A validator is a pure function object: it inspects an entity's public fields
and returns every rule violation it finds. It never raises for a failed rule
and never stops at the first failure.

Concrete validators describe their rules as pydantic schemas. Rule messages
are raised as ``PydanticCustomError`` so the text reaches the caller
verbatim (e.g. ``"Name is required"``).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from storefront.domain.shared.notification import NotificationErrorProps

T = TypeVar("T")


def require(value: Any, message: str) -> Any:
    """Reject ``None`` and blank strings with ``message``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", message)
    return value


def reject(message: str) -> None:
    """Fail the current schema rule with ``message``."""
    raise PydanticCustomError("rule", message)


class Validator(ABC, Generic[T]):
    """Rule check for one entity type."""

    @abstractmethod
    def validate(self, entity: T) -> List[NotificationErrorProps]:
        """Return every rule violation found on ``entity`` (empty when valid)."""


class SchemaValidator(Validator[T]):
    """Validator backed by a pydantic schema.

    Subclasses set ``schema`` and ``context`` and implement ``fields`` to
    extract the values the schema checks.
    """

    schema: Type[BaseModel]
    context: str

    @abstractmethod
    def fields(self, entity: T) -> Dict[str, Any]:
        """Extract the values to validate from ``entity``."""

    def validate(self, entity: T) -> List[NotificationErrorProps]:
        try:
            self.schema.model_validate(self.fields(entity))
        except ValidationError as exc:
            return [
                NotificationErrorProps(context=self.context, message=error["msg"])
                for error in exc.errors()
            ]
        return []


class ValidatorFactory:
    """Registry table mapping entity types to their validator.

    Validators are registered at import time next to the entity they check.
    Lookup walks the entity's MRO so a subtype uses its parent's validator
    unless it registers its own.
    """

    _registry: Dict[type, Validator] = {}

    @classmethod
    def register(cls, entity_type: type, validator: Validator) -> None:
        cls._registry[entity_type] = validator

    @classmethod
    def create(cls, entity_type: type) -> Validator:
        for klass in entity_type.__mro__:
            validator = cls._registry.get(klass)
            if validator is not None:
                return validator
        raise LookupError(f"No validator registered for {entity_type.__name__}")

    @classmethod
    def registered_types(cls) -> List[type]:
        return list(cls._registry)
