"""
GetInventoryStatusQuery.
"""

from dataclasses import dataclass


@dataclass
class GetInventoryStatusQuery:
    """Query for a product's stock counts."""

    product_id: str
