"""
Model registration for the products app.

Models live in products.infrastructure.models; importing them here lets
Django discover them when the app registry is populated.
"""
from products.infrastructure.models import Product  # noqa: F401
