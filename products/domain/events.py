"""
Product domain events.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class ProductCreated(DomainEvent):
    """Event raised when a product is added to the catalog."""

    def __init__(self, product_id: str, max_per_user: int, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id
        self.max_per_user = max_per_user

    def payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id, "max_per_user": self.max_per_user}


class ProductUpdated(DomainEvent):
    """Event raised when product metadata changes."""

    def __init__(self, product_id: str, changed_fields: list, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id
        self.changed_fields = list(changed_fields)

    def payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id, "changed_fields": self.changed_fields}


class ProductDeleted(DomainEvent):
    """Event raised when a product and its pool are removed."""

    def __init__(self, product_id: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id

    def payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id}
