"""
Inventory domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: allocation of codes to users, bulk loading
and inventory accounting.
"""

import logging
from typing import List, Optional, Sequence

from core import metrics
from core.domain.exceptions import (
    CodeAlreadyAssignedError,
    CodeNotFoundError,
    ContentionError,
    InvalidCodeValueError,
    NoStockError,
    ProductNotFoundError,
)
from core.domain.value_objects import CodeValue, UserIdentifier
from core.infrastructure.database import RetryPolicy
from inventory.domain.code import Code
from inventory.domain.outcomes import (
    AssignmentResult,
    DeliveryOutcome,
    InventoryCounts,
    LoadOutcome,
    LoadSummary,
)
from inventory.ports.code_repository import CodeRepository
from inventory.ports.delivery_repository import DeliveryRepository
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CodeAllocator:
    """
    Domain service handing out codes to users.

    Mutual exclusion is left entirely to the store: a code is claimed by a
    conditional update and the ledger insert is guarded by a uniqueness
    constraint. A lost race is retried from the product lookup, up to the
    retry policy's ceiling.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        code_repository: CodeRepository,
        delivery_repository: DeliveryRepository,
        retry_policy: Optional[RetryPolicy] = None,
        strict_user_cap: bool = False,
    ):
        self.product_repository = product_repository
        self.code_repository = code_repository
        self.delivery_repository = delivery_repository
        self.retry_policy = retry_policy or RetryPolicy()
        self.strict_user_cap = strict_user_cap

    async def deliver(self, product_id: str, user_id: str) -> DeliveryOutcome:
        """
        Give the user a code, or return their latest one if the cap is reached.

        Args:
            product_id: Product identifier
            user_id: Opaque user identifier

        Returns:
            DeliveryOutcome

        Raises:
            ProductNotFoundError: If the product is missing or inactive
            NoStockError: If the user is under the cap and the pool is empty
            ContentionError: If every attempt lost its race
        """
        user = str(UserIdentifier(user_id))
        max_attempts = self.retry_policy.max_attempts

        for attempt in range(1, max_attempts + 1):
            product = await self.product_repository.find_active_by_id(product_id)
            if not product:
                raise ProductNotFoundError(f"Product {product_id} not found")
            cap = product.cap

            deliveries = await self.delivery_repository.list_for_user(product.id, user)
            count = len(deliveries)
            if count >= cap:
                return DeliveryOutcome(code=deliveries[-1].code, is_new=False, count=count, max=cap)

            candidate = await self.code_repository.pick_available(product.id)
            if candidate is None:
                metrics.code_delivery_no_stock_total.labels(product_id=product.id).inc()
                raise NoStockError(f"No codes available for product {product.id}")

            result = await self.code_repository.assign_and_record(
                candidate,
                user,
                user_cap=cap if self.strict_user_cap else None,
            )
            if result is AssignmentResult.ASSIGNED:
                metrics.code_delivery_attempts.observe(attempt)
                logger.info(
                    "Code delivered",
                    extra={
                        "product_id": product.id,
                        "code_id": candidate.id,
                        "delivered_count": count + 1,
                        "attempt": attempt,
                    },
                )
                return DeliveryOutcome(
                    code=candidate.code,
                    is_new=True,
                    count=count + 1,
                    max=cap,
                    code_id=candidate.id,
                )

            metrics.code_delivery_lost_races_total.labels(product_id=product.id).inc()
            logger.info(
                "Lost race for code %s (%s), attempt %d of %d",
                candidate.id,
                result.value,
                attempt,
                max_attempts,
                extra={"product_id": product.id},
            )
            if attempt < max_attempts:
                await self.retry_policy.backoff(attempt)

        metrics.code_delivery_contention_total.labels(product_id=product_id).inc()
        logger.warning(
            "Delivery abandoned after %d attempts",
            max_attempts,
            extra={"product_id": product_id},
        )
        raise ContentionError(f"Could not deliver a code after {max_attempts} attempts")

    async def assign(self, code_id: int, user_id: str) -> Code:
        """
        Assign a specific code to a user, ignoring the per-user cap.

        Args:
            code_id: Code id
            user_id: Opaque user identifier

        Returns:
            The assigned Code

        Raises:
            CodeNotFoundError: If the code does not exist
            CodeAlreadyAssignedError: If the code is not available
        """
        code = await self.code_repository.find_by_id(code_id)
        if code is None:
            raise CodeNotFoundError(f"Code {code_id} not found")

        assigned = code.assign(user_id)
        result = await self.code_repository.assign_and_record(code, assigned.assigned_to)
        if result is not AssignmentResult.ASSIGNED:
            raise CodeAlreadyAssignedError(f"Code {code_id} is already assigned")

        logger.info(
            "Code assigned manually",
            extra={"product_id": code.product_id, "code_id": code.id},
        )
        return assigned


class CodeLoader:
    """Domain service for bulk loading codes into a product's pool."""

    def __init__(self, product_repository: ProductRepository, code_repository: CodeRepository):
        self.product_repository = product_repository
        self.code_repository = code_repository

    @staticmethod
    def validate(codes: Sequence[str]) -> List[str]:
        """
        Check every value before anything is written.

        Raises:
            InvalidCodeValueError: On the first empty or oversized value
        """
        validated = []
        for position, value in enumerate(codes):
            try:
                validated.append(str(CodeValue(value)))
            except ValueError as exc:
                raise InvalidCodeValueError(f"Invalid code at position {position}: {exc}") from exc
        return validated

    async def load(self, product_id: str, codes: Sequence[str]) -> LoadSummary:
        """
        Add codes to a product, skipping values that already exist anywhere.

        Args:
            product_id: Product identifier (active or not)
            codes: Code strings

        Returns:
            LoadSummary with inserted and duplicate counts

        Raises:
            ProductNotFoundError: If the product does not exist
            InvalidCodeValueError: If a value is empty or too long
        """
        if not await self.product_repository.exists(product_id):
            raise ProductNotFoundError(f"Product {product_id} not found")

        values = self.validate(codes)
        outcomes = await self.code_repository.insert_if_absent(product_id, values)

        inserted = sum(1 for outcome in outcomes if outcome is LoadOutcome.INSERTED)
        summary = LoadSummary(inserted=inserted, duplicates=len(outcomes) - inserted)
        logger.info(
            "Loaded %d codes, skipped %d duplicates",
            summary.inserted,
            summary.duplicates,
            extra={"product_id": product_id},
        )
        return summary


class InventoryReporter:
    """Domain service reporting a product's stock."""

    def __init__(self, code_repository: CodeRepository):
        self.code_repository = code_repository

    async def status(self, product_id: str) -> InventoryCounts:
        """
        Count available and assigned codes.

        An unknown product reports zero of each rather than an error.
        """
        return await self.code_repository.count_by_status(product_id)
