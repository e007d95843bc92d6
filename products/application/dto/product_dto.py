"""
Product DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from products.domain.product import Product


@dataclass
class ProductDTO:
    """DTO for product information."""

    id: str
    name: str
    description: Optional[str]
    max_per_user: int
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        """Build the DTO from a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            max_per_user=product.max_per_user,
            status=product.status.value,
            created_at=product.created_at,
        )
