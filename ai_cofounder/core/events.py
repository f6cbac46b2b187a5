"""
Event system for decoupled communication between components.
Implements a simple pub/sub pattern for application events.
"""

from typing import Callable, Dict, List, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import asyncio
import logging

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Enumeration of event types in the application."""

    # Generation events
    PLAN_GENERATED = "plan.generated"
    VALIDATION_CONTENT_GENERATED = "validation.generated"
    MOCK_FALLBACK_USED = "generation.mock_fallback"

    # Plan workspace events
    PROJECTIONS_SAVED = "plan.projections_saved"
    MARKET_RESEARCH_SAVED = "plan.market_research_saved"
    PITCH_DECK_GENERATED = "pitch_deck.generated"
    PITCH_DECK_SHARED = "pitch_deck.shared"

    # Provider events
    PROVIDER_ERROR = "provider.error"

    # Directory events
    PROFILE_CREATED = "cofounder.created"
    MATCHES_COMPUTED = "cofounder.matched"

    # Account events
    USER_REGISTERED = "user.registered"


@dataclass
class Event:
    """Represents an application event."""

    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.utcnow)
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary."""
        return {
            "type": self.type.value,
            "data": self.data,
            "timestamp": self.timestamp.isoformat(),
            "source": self.source,
        }


EventHandler = Callable[[Event], Any]


class EventBus:
    """
    Simple event bus for pub/sub communication.
    Handler failures are logged and never reach the publisher.
    """

    def __init__(self):
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._async_handlers: Dict[EventType, List[EventHandler]] = {}

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe a handler to an event type."""
        if asyncio.iscoroutinefunction(handler):
            self._async_handlers.setdefault(event_type, []).append(handler)
        else:
            self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(f"Handler subscribed to {event_type.value}")

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe a handler from an event type."""
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)
        if handler in self._async_handlers.get(event_type, []):
            self._async_handlers[event_type].remove(handler)

    async def publish(self, event: Event) -> None:
        """Publish an event to all subscribers."""
        logger.debug(f"Publishing event: {event.type.value}")

        for handler in self._handlers.get(event.type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in sync event handler: {e}")

        tasks = [
            self._safe_call_async(handler, event)
            for handler in self._async_handlers.get(event.type, [])
        ]
        if tasks:
            await asyncio.gather(*tasks)

    async def _safe_call_async(self, handler: EventHandler, event: Event) -> None:
        try:
            await handler(event)
        except Exception as e:
            logger.error(f"Error in async event handler: {e}")

    def clear(self) -> None:
        """Clear all handlers (useful for testing)."""
        self._handlers.clear()
        self._async_handlers.clear()


# Global event bus instance
event_bus = EventBus()
