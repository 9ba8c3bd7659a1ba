"""Product domain events and their handlers."""

from dataclasses import dataclass

from storefront.core.logging import get_logger
from storefront.domain.events import Event, EventDispatcher, EventHandler

logger = get_logger(__name__, {"entity": "product"})


@dataclass(frozen=True)
class ProductCreatedEvent(Event):
    """Payload: ``{"id", "name", "price"}`` of the new product."""


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    def handle(self, event: ProductCreatedEvent) -> None:
        # No mail transport is configured; the notification is logged instead
        logger.info(
            f"Sending email: product {event.payload.get('name')} was created",
            extra={"event_name": event.event_name, "entity_id": event.payload.get("id")},
        )


def register_product_handlers(dispatcher: EventDispatcher) -> EventDispatcher:
    """Attach the default product handlers to ``dispatcher``."""
    dispatcher.register(ProductCreatedEvent.event_name, SendEmailWhenProductIsCreatedHandler())
    return dispatcher
