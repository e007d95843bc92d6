"""
Model registration for the inventory app.

Models live in inventory.infrastructure.models; importing them here lets
Django discover them when the app registry is populated.
"""
from inventory.infrastructure.models import Code, Delivery  # noqa: F401
