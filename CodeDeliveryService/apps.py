"""
App configuration for Code Delivery Service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Commands that never serve traffic and need no tracing or event handlers
SKIPPED_COMMANDS = (
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
    "createsuperuser",
)


class CodeDeliveryServiceConfig(AppConfig):
    """App configuration for CodeDeliveryService."""

    name = "CodeDeliveryService"
    verbose_name = "Code Delivery Service"

    def ready(self):
        """Called when Django starts."""
        if len(sys.argv) > 1 and sys.argv[1] in SKIPPED_COMMANDS:
            return

        # Django's autoreloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        logger.info("Setting up observability...")
        self.setup_observability()
        self.register_event_handlers()
        self._initialized = True
        logger.info("Observability setup complete")

    def setup_observability(self):
        """Setup tracing after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()

    def register_event_handlers(self):
        """Register event handlers after apps are ready."""
        from core.infrastructure.event_handlers import register_event_handlers as register

        register()
