"""
Product administration commands.
"""

from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import ProductStatus


@dataclass
class CreateProductCommand:
    """Command to add a product to the catalog."""

    product_id: str
    name: str
    description: Optional[str] = None
    max_per_user: int = 1


@dataclass
class UpdateProductCommand:
    """Command to change product metadata; None leaves a field untouched."""

    product_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    max_per_user: Optional[int] = None
    status: Optional[ProductStatus] = None
    clear_description: bool = False

    def has_changes(self) -> bool:
        """Check whether the command changes anything."""
        return self.clear_description or any(
            value is not None
            for value in (self.name, self.description, self.max_per_user, self.status)
        )


@dataclass
class DeleteProductCommand:
    """Command to remove a product and its code pool."""

    product_id: str
