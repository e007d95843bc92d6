"""
Code domain entity.

A code is an opaque single-use string drawn from a product's pool.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.exceptions import CodeAlreadyAssignedError
from core.domain.value_objects import CodeStatus, CodeValue, UserIdentifier


@dataclass(frozen=True)
class Code:
    """
    Code domain entity.

    ``status`` is ASSIGNED exactly when both ``assigned_to`` and
    ``assigned_at`` are set.
    """

    id: Optional[int]
    product_id: str
    code: str
    status: CodeStatus
    assigned_to: Optional[str]
    assigned_at: Optional[datetime]
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate code entity."""
        CodeValue(self.code)
        if self.status == CodeStatus.ASSIGNED:
            if self.assigned_to is None or self.assigned_at is None:
                raise ValueError("Assigned code must record user and time")
        elif self.assigned_to is not None or self.assigned_at is not None:
            raise ValueError("Available code cannot carry assignment data")

    @classmethod
    def create(cls, product_id: str, code: str) -> "Code":
        """
        Create a new available Code.

        Args:
            product_id: Owning product
            code: Code string

        Returns:
            Code entity instance
        """
        return cls(
            id=None,
            product_id=product_id,
            code=code,
            status=CodeStatus.AVAILABLE,
            assigned_to=None,
            assigned_at=None,
        )

    def is_available(self) -> bool:
        """Check if the code can still be handed out."""
        return self.status == CodeStatus.AVAILABLE

    def assign(self, user_id: str, at: Optional[datetime] = None) -> "Code":
        """
        Return an assigned copy of this code.

        Raises:
            CodeAlreadyAssignedError: If the code is already assigned
        """
        if not self.is_available():
            raise CodeAlreadyAssignedError(f"Code {self.id} is already assigned")
        return replace(
            self,
            status=CodeStatus.ASSIGNED,
            assigned_to=str(UserIdentifier(user_id)),
            assigned_at=at or datetime.now(timezone.utc),
        )
