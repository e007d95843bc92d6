"""
Inventory DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from inventory.domain.code import Code


@dataclass
class DeliveryDTO:
    """DTO for a deliver response."""

    code: str
    is_new: bool
    count: int
    max: int


@dataclass
class LoadResultDTO:
    """DTO for a bulk load response."""

    product_id: str
    inserted: int
    duplicates: int


@dataclass
class InventoryStatusDTO:
    """DTO for inventory counts."""

    product_id: str
    available: int
    assigned: int

    @property
    def total(self) -> int:
        """Total number of codes in the pool."""
        return self.available + self.assigned


@dataclass
class CodeDTO:
    """DTO for code information."""

    id: int
    product_id: str
    code: str
    status: str
    assigned_to: Optional[str]
    assigned_at: Optional[datetime]
    created_at: Optional[datetime]

    @classmethod
    def from_entity(cls, code: Code) -> "CodeDTO":
        """Build the DTO from a Code entity."""
        return cls(
            id=code.id,
            product_id=code.product_id,
            code=code.code,
            status=code.status.value,
            assigned_to=code.assigned_to,
            assigned_at=code.assigned_at,
            created_at=code.created_at,
        )
