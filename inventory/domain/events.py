"""
Inventory domain events.

Domain events represent something that happened to a product's code pool.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class CodeDelivered(DomainEvent):
    """Event raised when the allocator hands a new code to a user."""

    def __init__(
        self,
        product_id: str,
        user: str,
        code_id: int,
        delivered_count: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize CodeDelivered event.

        Args:
            product_id: Product the code was drawn from
            user: Receiving user
            code_id: Id of the assigned code
            delivered_count: Codes the user holds for the product afterwards
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id
        self.user = user
        self.code_id = code_id
        self.delivered_count = delivered_count

    def payload(self) -> Dict[str, Any]:
        # The code string itself is a secret and stays out of the event.
        return {
            "product_id": self.product_id,
            "user": self.user,
            "code_id": self.code_id,
            "delivered_count": self.delivered_count,
        }


class CodeAssigned(DomainEvent):
    """Event raised when an administrator assigns a specific code."""

    def __init__(self, product_id: str, user: str, code_id: int, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id
        self.user = user
        self.code_id = code_id

    def payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id, "user": self.user, "code_id": self.code_id}


class CodesLoaded(DomainEvent):
    """Event raised after a bulk load."""

    def __init__(self, product_id: str, inserted: int, duplicates: int, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=product_id, occurred_at=occurred_at)
        self.product_id = product_id
        self.inserted = inserted
        self.duplicates = duplicates

    def payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id, "inserted": self.inserted, "duplicates": self.duplicates}
