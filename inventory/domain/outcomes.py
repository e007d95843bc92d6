"""
Outcome types shared by the inventory domain services and repositories.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AssignmentResult(Enum):
    """Result of one atomic assign-and-record attempt."""

    ASSIGNED = "assigned"
    # The code stopped being available between pick and update
    LOST_RACE = "lost_race"
    # The ledger already holds this (product, user, code)
    DUPLICATE_DELIVERY = "duplicate_delivery"
    # Strict mode only: the user reached the cap inside the transaction
    CAP_REACHED = "cap_reached"


class LoadOutcome(Enum):
    """Per-value result of a bulk load."""

    INSERTED = "inserted"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class DeliveryOutcome:
    """What deliver() hands back to the caller."""

    code: str
    is_new: bool
    count: int
    max: int
    code_id: Optional[int] = None


@dataclass(frozen=True)
class LoadSummary:
    """Counts produced by a bulk load."""

    inserted: int
    duplicates: int


@dataclass(frozen=True)
class InventoryCounts:
    """Snapshot of a product's pool by status."""

    available: int
    assigned: int
