"""
Delivery record entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DeliveryRecord:
    """One row of the append-only delivery ledger."""

    id: Optional[int]
    product_id: str
    user: str
    code: str
    created_at: datetime
