"""Domain events and the in-process dispatcher."""
from storefront.domain.events.dispatcher import EventDispatcher, Handler, Subscription
from storefront.domain.events.event import Event, EventHandler

__all__ = ["Event", "EventDispatcher", "EventHandler", "Handler", "Subscription"]
