"""Synchronous in-process event dispatcher.

Handlers are registered per event name and invoked in registration order
when an event with that name is notified. There is no isolation between
handlers: the first handler that raises aborts the remaining ones and the
exception reaches the caller of ``notify`` unchanged.
"""

import itertools
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from storefront.core.logging import get_logger
from storefront.domain.events.event import Event

logger = get_logger(__name__)

Handler = Callable[[Event], None]

_subscription_ids = itertools.count(1)


@dataclass(frozen=True)
class Subscription:
    """Opaque token identifying one registration of a handler."""

    event_name: str
    handler: Handler = field(compare=False)
    id: int = field(default_factory=lambda: next(_subscription_ids))


class EventDispatcher:
    """Registry mapping event names to ordered handler registrations.

    Registering the same handler twice yields two subscriptions, and the
    handler runs twice per notify.
    """

    def __init__(self) -> None:
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)

    def register(self, event_name: str, handler: Handler) -> Subscription:
        subscription = Subscription(event_name=event_name, handler=handler)
        self._subscriptions[event_name].append(subscription)
        logger.debug(
            f"Registered {_handler_name(handler)} for {event_name}",
            extra={"event_name": event_name, "handler": _handler_name(handler)},
        )
        return subscription

    def unregister(self, subscription: Subscription) -> None:
        """Remove one registration. Unknown or already removed tokens are ignored."""
        registered = self._subscriptions.get(subscription.event_name)
        if not registered:
            return
        for index, candidate in enumerate(registered):
            if candidate.id == subscription.id:
                del registered[index]
                break
        if not registered:
            del self._subscriptions[subscription.event_name]

    def unregister_all(self) -> None:
        self._subscriptions.clear()

    def handlers_for(self, event_name: str) -> List[Handler]:
        return [subscription.handler for subscription in self._subscriptions.get(event_name, [])]

    @property
    def event_names(self) -> List[str]:
        return list(self._subscriptions)

    def notify(self, event: Event) -> None:
        """Invoke every handler registered for ``event.event_name``, in order."""
        # Snapshot so handlers registering/unregistering don't affect this pass
        subscriptions = list(self._subscriptions.get(event.event_name, []))
        logger.debug(
            f"Dispatching {event.event_name} to {len(subscriptions)} handler(s)",
            extra={"event_name": event.event_name},
        )
        for subscription in subscriptions:
            subscription.handler(event)


def _handler_name(handler: Handler) -> str:
    if hasattr(handler, "__qualname__"):
        return handler.__qualname__
    return type(handler).__name__
