# infinite_paper/interfaces/event_bus.py

from typing import Callable, Any
from ..events import EventType

class EventBus:
    """Interface for broadcasting session changes to hosts."""

    def subscribe(self, event_type: EventType, callback: Callable[..., Any]) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Session event to listen for
            callback: Called with the event payload as keyword arguments
        """
        raise NotImplementedError("Subclasses must implement this method")

    def unsubscribe(self, event_type: EventType, callback: Callable[..., Any]) -> bool:
        """
        Remove a previously registered callback.

        Returns:
            True if the callback was registered, False otherwise
        """
        raise NotImplementedError("Subclasses must implement this method")

    def publish(self, event_type: EventType, **data: Any) -> None:
        """
        Deliver an event to every subscriber of its type.

        Args:
            event_type: Session event being published
            **data: Event payload
        """
        raise NotImplementedError("Subclasses must implement this method")

    def has_subscribers(self, event_type: EventType) -> bool:
        """Check whether anyone listens for an event type."""
        raise NotImplementedError("Subclasses must implement this method")

    def clear_all_subscriptions(self) -> None:
        """Drop every subscription. Used when a session is torn down."""
        raise NotImplementedError("Subclasses must implement this method")
