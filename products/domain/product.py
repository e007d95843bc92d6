"""
Product domain entity.

A product defines a pool of codes and the maximum number of distinct codes
a single user may receive from it.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import ProductId, ProductStatus

DEFAULT_MAX_PER_USER = 1


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    This is an immutable value object with business logic.
    """

    id: str
    name: str
    description: Optional[str]
    max_per_user: int
    status: ProductStatus
    created_at: datetime

    def __post_init__(self):
        """Validate product entity."""
        ProductId(self.id)
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")
        if self.max_per_user is not None and self.max_per_user < 0:
            raise ValueError("max_per_user cannot be negative")

    @classmethod
    def create(
        cls,
        product_id: str,
        name: str,
        description: Optional[str] = None,
        max_per_user: int = DEFAULT_MAX_PER_USER,
    ) -> "Product":
        """
        Create a new active Product entity.

        Args:
            product_id: Caller-assigned identifier
            name: Product display name
            description: Optional free text
            max_per_user: Maximum distinct codes per user

        Returns:
            Product entity instance
        """
        return cls(
            id=product_id.strip(),
            name=name.strip(),
            description=description,
            max_per_user=max_per_user,
            status=ProductStatus.ACTIVE,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def cap(self) -> int:
        """Effective per-user cap; unset or zero means one code per user."""
        return self.max_per_user or DEFAULT_MAX_PER_USER

    def is_active(self) -> bool:
        """Check whether codes may be delivered for this product."""
        return self.status == ProductStatus.ACTIVE

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        max_per_user: Optional[int] = None,
        status: Optional[ProductStatus] = None,
        clear_description: bool = False,
    ) -> "Product":
        """
        Create a new Product instance with the given fields changed.

        Fields left as None keep their current value; ``clear_description``
        removes the description.

        Returns:
            New Product instance
        """
        changes = {}
        if name is not None:
            changes["name"] = name.strip()
        if clear_description:
            changes["description"] = None
        elif description is not None:
            changes["description"] = description
        if max_per_user is not None:
            changes["max_per_user"] = max_per_user
        if status is not None:
            changes["status"] = status
        return replace(self, **changes)

    def activate(self) -> "Product":
        """Return an active copy of this product."""
        return replace(self, status=ProductStatus.ACTIVE)

    def deactivate(self) -> "Product":
        """Return an inactive copy of this product."""
        return replace(self, status=ProductStatus.INACTIVE)
