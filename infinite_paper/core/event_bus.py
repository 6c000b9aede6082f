# infinite_paper/core/event_bus.py

import logging
from typing import Callable, Dict, Any, List
from ..interfaces.event_bus import EventBus as EventBusInterface
from ..events import EventType

logger = logging.getLogger(__name__)

class EventBus(EventBusInterface):
    """
    In-process event bus used by a paper session.

    Subscribers are called synchronously, in subscription order, from
    whichever event caused the change (a viewport report, a jump or a fetch
    completion on the event loop).
    """

    def __init__(self, debug_logging: bool = False):
        """
        Args:
            debug_logging: Whether to log every published event
        """
        self.listeners: Dict[EventType, List[Callable[..., Any]]] = {}
        self.debug_logging = debug_logging

    def subscribe(self, event_type: EventType, callback: Callable[..., Any]) -> None:
        callbacks = self.listeners.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)
            logger.debug(f"Subscribed to event '{event_type.name}'")

    def unsubscribe(self, event_type: EventType, callback: Callable[..., Any]) -> bool:
        if event_type in self.listeners and callback in self.listeners[event_type]:
            self.listeners[event_type].remove(callback)
            logger.debug(f"Unsubscribed from event '{event_type.name}'")
            return True
        return False

    def publish(self, event_type: EventType, **data: Any) -> None:
        if self.debug_logging:
            logger.debug(f"Event published: {event_type.name} - {data}")

        # Copy so a subscriber may unsubscribe itself while being called
        for callback in list(self.listeners.get(event_type, [])):
            try:
                callback(event_type=event_type, **data)
            except Exception:
                # A broken subscriber must not break the session
                logger.exception(f"Error in event handler for '{event_type.name}'")

    def has_subscribers(self, event_type: EventType) -> bool:
        return bool(self.listeners.get(event_type))

    def clear_all_subscriptions(self) -> None:
        self.listeners.clear()
        logger.debug("All event subscriptions cleared")
