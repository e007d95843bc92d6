"""
Django implementation of DeliveryRepository port.
"""

from typing import List

from asgiref.sync import sync_to_async

from core.infrastructure.database import translate_store_errors
from inventory.domain.delivery import DeliveryRecord
from inventory.infrastructure.models import Delivery as DeliveryModel
from inventory.ports.delivery_repository import DeliveryRepository


class DjangoDeliveryRepository(DeliveryRepository):
    """Django ORM implementation of DeliveryRepository."""

    def _to_domain(self, model: DeliveryModel) -> DeliveryRecord:
        return DeliveryRecord(
            id=model.id,
            product_id=model.product_id,
            user=model.user,
            code=model.code,
            created_at=model.created_at,
        )

    @sync_to_async
    @translate_store_errors
    def list_for_user(self, product_id: str, user: str) -> List[DeliveryRecord]:
        """
        List a user's deliveries for a product, oldest first.

        Args:
            product_id: Product identifier
            user: User identifier

        Returns:
            List of DeliveryRecord entities
        """
        models = DeliveryModel.objects.filter(  # pylint: disable=no-member
            product_id=product_id, user=user
        ).order_by("id")
        return [self._to_domain(model) for model in models]
