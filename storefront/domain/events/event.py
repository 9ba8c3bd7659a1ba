"""Domain event record and handler base class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar


@dataclass(frozen=True)
class Event:
    """Immutable record of something that happened in the domain.

    Subclasses may override ``event_name``; it defaults to the class name
    and is the key the dispatcher routes on.
    """

    payload: Any
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    event_name: ClassVar[str] = "Event"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "event_name" not in cls.__dict__:
            cls.event_name = cls.__name__


class EventHandler(ABC):
    """Reacts to one kind of event. Instances are callable."""

    @abstractmethod
    def handle(self, event: Event) -> None: ...

    def __call__(self, event: Event) -> None:
        self.handle(event)
