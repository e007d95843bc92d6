"""
Delivery repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import List

from inventory.domain.delivery import DeliveryRecord


class DeliveryRepository(ABC):
    """Read access to the delivery ledger."""

    @abstractmethod
    async def list_for_user(self, product_id: str, user: str) -> List[DeliveryRecord]:
        """
        List a user's deliveries for a product in insertion order.

        Args:
            product_id: Product identifier
            user: User identifier

        Returns:
            List of DeliveryRecord entities, oldest first
        """
        pass
