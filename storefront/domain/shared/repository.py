"""Generic repository contract."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class RepositoryInterface(ABC, Generic[T]):
    """Persistence access for one entity type.

    ``find`` raises ``NotFoundError`` when the id is unknown.
    """

    @abstractmethod
    def create(self, entity: T) -> None: ...

    @abstractmethod
    def update(self, entity: T) -> None: ...

    @abstractmethod
    def find(self, id: str) -> T: ...

    @abstractmethod
    def find_all(self) -> List[T]: ...
