"""
Domain events base classes.

Domain events record something that happened to products or the code
inventory. They are published after the store change has committed and
are consumed by audit logging and metrics handlers.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Subclasses pass their own attributes through ``payload`` so that
    ``to_dict`` can serialize them without knowing the concrete type.
    """

    def __init__(self, aggregate_id: str, occurred_at: Optional[datetime] = None):
        """
        Initialize event.

        Args:
            aggregate_id: Identifier of the aggregate the event is about
            occurred_at: When the event occurred (defaults to now, UTC)
        """
        self.event_id = uuid.uuid4()
        self.occurred_at = occurred_at or datetime.now(timezone.utc)
        self.aggregate_id = aggregate_id

    @property
    def event_type(self) -> str:
        """Event name, taken from the class name."""
        return type(self).__name__

    def payload(self) -> Dict[str, Any]:
        """Event specific fields."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        data = {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
        }
        data.update(self.payload())
        return data

    def __repr__(self) -> str:
        return f"<{self.event_type} {self.aggregate_id}>"


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass
