"""
Event handlers for domain events.

These handlers process domain events for side effects like audit logging
and metrics.
"""

import logging

from core import metrics
from core.domain.events import DomainEvent, EventHandler
from inventory.domain.events import CodeAssigned, CodeDelivered, CodesLoaded
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated

logger = logging.getLogger(__name__)

AUDITED_EVENTS = (
    CodeDelivered,
    CodeAssigned,
    CodesLoaded,
    ProductCreated,
    ProductUpdated,
    ProductDeleted,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the ``audit`` logger as a structured record.
    """

    audit_logger = logging.getLogger("audit")

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        self.audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


class MetricsEventHandler(EventHandler):
    """Event handler translating inventory events into Prometheus counters."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        if isinstance(event, CodeDelivered):
            metrics.codes_delivered_total.labels(product_id=event.product_id, outcome="new").inc()
        elif isinstance(event, CodeAssigned):
            metrics.codes_delivered_total.labels(product_id=event.product_id, outcome="manual").inc()
        elif isinstance(event, CodesLoaded):
            metrics.codes_loaded_total.labels(product_id=event.product_id).inc(event.inserted)
            metrics.codes_load_duplicates_total.labels(product_id=event.product_id).inc(event.duplicates)


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, audit_handler)

    event_bus.subscribe(CodeDelivered, metrics_handler)
    event_bus.subscribe(CodeAssigned, metrics_handler)
    event_bus.subscribe(CodesLoaded, metrics_handler)

    logger.info("Event handlers registered")
