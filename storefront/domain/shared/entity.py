"""Base class for identity-bearing domain objects."""

from abc import ABC
from typing import Any, Dict

from storefront.domain.shared.exceptions import NotificationError
from storefront.domain.shared.notification import Notification
from storefront.domain.shared.validator import ValidatorFactory


class Entity(ABC):
    """Identity-bearing domain object validated on construction.

    An entity is either fully valid or never observably constructed:
    subclasses call ``_validate()`` at the end of ``__init__`` and
    ``NotificationError`` escapes the constructor when any rule fails.
    """

    def __init__(self, id: str):
        self._id = id
        self.notification = Notification()

    @property
    def id(self) -> str:
        return self._id

    def _validate(self) -> None:
        # Fresh notification per pass
        self.notification = Notification()
        validator = ValidatorFactory.create(type(self))
        for error in validator.validate(self):
            self.notification.add_error(error)
        if self.notification.has_errors():
            raise NotificationError(list(self.notification.get_errors()))

    def _change(self, attribute: str, value: Any) -> None:
        """Set ``attribute`` and re-validate, restoring it if validation fails."""
        self._change_many({attribute: value})

    def _change_many(self, changes: Dict[str, Any]) -> None:
        """Apply several attribute changes as one validation pass.

        On failure every attribute and the last valid notification are put
        back, so the entity is left exactly as it was.
        """
        previous = {attribute: getattr(self, attribute) for attribute in changes}
        previous_notification = self.notification
        for attribute, value in changes.items():
            setattr(self, attribute, value)
        try:
            self._validate()
        except NotificationError:
            for attribute, value in previous.items():
                setattr(self, attribute, value)
            self.notification = previous_notification
            raise

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((self.__class__, self._id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"
