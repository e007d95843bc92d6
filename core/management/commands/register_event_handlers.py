"""
Django management command to register event handlers.

Handlers are registered by the project's AppConfig at startup; this command
registers them again and lists the subscriptions, which helps when
checking a deployment.
"""
import logging

from django.core.management.base import BaseCommand

from core.infrastructure.event_handlers import AUDITED_EVENTS, register_event_handlers
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to register event handlers."""

    help = "Register event handlers with the event bus and list subscriptions"

    def handle(self, *args, **options):
        """Execute the command."""
        register_event_handlers()
        for event_type in AUDITED_EVENTS:
            handlers = ", ".join(h.__class__.__name__ for h in event_bus.handlers_for(event_type))
            self.stdout.write(f"{event_type.__name__}: {handlers}")
        self.stdout.write(self.style.SUCCESS("Event handlers registered successfully"))
