"""
Django implementation of CodeRepository port.

This adapter converts between domain entities and Django ORM models and
owns the transactional assign-and-record unit.
"""

import logging
from typing import List, Optional, Sequence

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone

from core.domain.value_objects import CodeStatus
from core.infrastructure.database import translate_store_errors
from inventory.domain.code import Code
from inventory.domain.outcomes import AssignmentResult, InventoryCounts, LoadOutcome
from inventory.infrastructure.models import Code as CodeModel
from inventory.infrastructure.models import Delivery as DeliveryModel
from inventory.ports.code_repository import CodeRepository
from products.infrastructure.models import Product as ProductModel

logger = logging.getLogger(__name__)

# Keeps the duplicate prefilter under SQLite's bound-parameter limit
PREFILTER_CHUNK_SIZE = 500


class DjangoCodeRepository(CodeRepository):
    """
    Django ORM implementation of CodeRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Uses conditional updates and unique constraints for mutual exclusion
    3. Implements repository interface
    """

    def _to_domain(self, model: CodeModel) -> Code:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Code model

        Returns:
            Code domain entity
        """
        return Code(
            id=model.id,
            product_id=model.product_id,
            code=model.code,
            status=CodeStatus(model.status),
            assigned_to=model.assigned_to,
            assigned_at=model.assigned_at,
            created_at=model.created_at,
        )

    @sync_to_async
    @translate_store_errors
    def pick_available(self, product_id: str) -> Optional[Code]:
        """Return the first available code in primary-key order."""
        model = (
            CodeModel.objects.filter(  # pylint: disable=no-member
                product_id=product_id, status=CodeStatus.AVAILABLE.value
            )
            .order_by("id")
            .first()
        )
        return self._to_domain(model) if model else None

    @sync_to_async
    @translate_store_errors
    def assign_and_record(self, code: Code, user: str, user_cap: Optional[int] = None) -> AssignmentResult:
        """
        Atomically assign a code and append the delivery record.

        Args:
            code: Code picked by the caller
            user: Receiving user
            user_cap: When set, lock the product row and re-count first

        Returns:
            AssignmentResult
        """
        now = timezone.now()
        try:
            with transaction.atomic():
                if user_cap is not None:
                    # Serializes strict-mode deliveries of the same product
                    ProductModel.objects.select_for_update().filter(  # pylint: disable=no-member
                        id=code.product_id
                    ).first()
                    held = DeliveryModel.objects.filter(  # pylint: disable=no-member
                        product_id=code.product_id, user=user
                    ).count()
                    if held >= user_cap:
                        return AssignmentResult.CAP_REACHED

                updated = CodeModel.objects.filter(  # pylint: disable=no-member
                    id=code.id, status=CodeStatus.AVAILABLE.value
                ).update(
                    status=CodeStatus.ASSIGNED.value,
                    assigned_to=user,
                    assigned_at=now,
                )
                if updated == 0:
                    return AssignmentResult.LOST_RACE

                DeliveryModel.objects.create(  # pylint: disable=no-member
                    product_id=code.product_id,
                    user=user,
                    code=code.code,
                    created_at=now,
                )
        except IntegrityError:
            logger.info(
                "Delivery record for code %s already exists",
                code.id,
                extra={"product_id": code.product_id, "code_id": code.id},
            )
            return AssignmentResult.DUPLICATE_DELIVERY
        return AssignmentResult.ASSIGNED

    @sync_to_async
    @translate_store_errors
    def insert_if_absent(self, product_id: str, codes: Sequence[str]) -> List[LoadOutcome]:
        """
        Insert codes that do not exist yet, one savepoint per value.

        Args:
            product_id: Owning product
            codes: Code strings, in input order

        Returns:
            One LoadOutcome per input value
        """
        existing = set()
        unique_values = list(dict.fromkeys(codes))
        for start in range(0, len(unique_values), PREFILTER_CHUNK_SIZE):
            chunk = unique_values[start : start + PREFILTER_CHUNK_SIZE]
            existing.update(
                CodeModel.objects.filter(code__in=chunk).values_list(  # pylint: disable=no-member
                    "code", flat=True
                )
            )

        outcomes = []
        seen = set()
        for value in codes:
            if value in existing or value in seen:
                outcomes.append(LoadOutcome.DUPLICATE)
                continue
            seen.add(value)
            try:
                with transaction.atomic():
                    CodeModel.objects.create(product_id=product_id, code=value)  # pylint: disable=no-member
            except IntegrityError:
                # Inserted concurrently by another loader
                outcomes.append(LoadOutcome.DUPLICATE)
                continue
            outcomes.append(LoadOutcome.INSERTED)
        return outcomes

    @sync_to_async
    @translate_store_errors
    def count_by_status(self, product_id: str) -> InventoryCounts:
        """Count a product's codes grouped by status."""
        rows = (
            CodeModel.objects.filter(product_id=product_id)  # pylint: disable=no-member
            .order_by()
            .values("status")
            .annotate(total=Count("id"))
        )
        totals = {row["status"]: row["total"] for row in rows}
        return InventoryCounts(
            available=totals.get(CodeStatus.AVAILABLE.value, 0),
            assigned=totals.get(CodeStatus.ASSIGNED.value, 0),
        )

    @sync_to_async
    @translate_store_errors
    def find_by_id(self, code_id: int) -> Optional[Code]:
        """
        Find a code by ID.

        Args:
            code_id: Code id

        Returns:
            Code entity or None if not found
        """
        try:
            model = CodeModel.objects.get(id=code_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except CodeModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    @translate_store_errors
    def list_for_product(
        self, product_id: str, status: Optional[CodeStatus] = None, limit: int = 100
    ) -> List[Code]:
        """List a product's newest codes, optionally filtered by status."""
        queryset = CodeModel.objects.filter(product_id=product_id)  # pylint: disable=no-member
        if status is not None:
            queryset = queryset.filter(status=status.value)
        return [self._to_domain(model) for model in queryset.order_by("-id")[:limit]]

    @sync_to_async
    @translate_store_errors
    def delete(self, code_id: int) -> bool:
        """Delete a code; the delivery ledger is left untouched."""
        deleted, _ = CodeModel.objects.filter(id=code_id).delete()  # pylint: disable=no-member
        return deleted > 0
