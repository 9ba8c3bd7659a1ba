"""Customer domain events and their handlers."""

from dataclasses import dataclass

from storefront.core.logging import get_logger
from storefront.domain.events import Event, EventDispatcher, EventHandler

logger = get_logger(__name__, {"entity": "customer"})


@dataclass(frozen=True)
class CustomerCreatedEvent(Event):
    """Payload: ``{"id", "name"}`` of the new customer."""


@dataclass(frozen=True)
class CustomerAddressChangedEvent(Event):
    """Payload: ``{"id", "name", "address"}`` after the change."""


class LogWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        logger.info(
            "Customer created (first handler)",
            extra={"event_name": event.event_name, "entity_id": event.payload.get("id")},
        )


class LogAgainWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        logger.info(
            "Customer created (second handler)",
            extra={"event_name": event.event_name, "entity_id": event.payload.get("id")},
        )


class LogWhenCustomerAddressChangedHandler(EventHandler):
    def handle(self, event: CustomerAddressChangedEvent) -> None:
        payload = event.payload
        logger.info(
            f"Customer address: {payload['id']}, {payload['name']} changed to: {payload['address']}",
            extra={"event_name": event.event_name, "entity_id": payload["id"]},
        )


def register_customer_handlers(dispatcher: EventDispatcher) -> EventDispatcher:
    """Attach the default customer handlers to ``dispatcher``."""
    dispatcher.register(CustomerCreatedEvent.event_name, LogWhenCustomerIsCreatedHandler())
    dispatcher.register(CustomerCreatedEvent.event_name, LogAgainWhenCustomerIsCreatedHandler())
    dispatcher.register(CustomerAddressChangedEvent.event_name, LogWhenCustomerAddressChangedHandler())
    return dispatcher
