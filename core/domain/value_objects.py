"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum

MAX_CODE_LENGTH = 255
MAX_USER_IDENTIFIER_LENGTH = 255
MAX_PRODUCT_ID_LENGTH = 100


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class ProductId(ValueObject):
    """Caller-assigned product identifier."""

    value: str

    def __post_init__(self):
        """Validate identifier."""
        if not self.value or not self.value.strip():
            raise ValueError("Product id cannot be empty")
        if len(self.value) > MAX_PRODUCT_ID_LENGTH:
            raise ValueError("Product id too long")

    def __str__(self) -> str:
        """Return identifier as string."""
        return self.value


@dataclass(frozen=True)
class UserIdentifier(ValueObject):
    """Opaque end-user identifier supplied by the caller."""

    value: str

    def __post_init__(self):
        """Validate identifier."""
        if not isinstance(self.value, str):
            raise ValueError("User identifier must be a string")
        if not self.value or not self.value.strip():
            raise ValueError("User identifier cannot be empty")
        if len(self.value) > MAX_USER_IDENTIFIER_LENGTH:
            raise ValueError("User identifier too long")

    def __str__(self) -> str:
        """Return identifier as string."""
        return self.value


@dataclass(frozen=True)
class CodeValue(ValueObject):
    """An opaque activation code string."""

    value: str

    def __post_init__(self):
        """Validate code string."""
        if not isinstance(self.value, str):
            raise ValueError("Code must be a string")
        if not self.value or not self.value.strip():
            raise ValueError("Code cannot be empty")
        if len(self.value) > MAX_CODE_LENGTH:
            raise ValueError(f"Code longer than {MAX_CODE_LENGTH} characters")

    def __str__(self) -> str:
        """Return code as string."""
        return self.value


class ProductStatus(Enum):
    """Product lifecycle status."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class CodeStatus(Enum):
    """Code status value object."""

    AVAILABLE = "available"
    ASSIGNED = "assigned"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
