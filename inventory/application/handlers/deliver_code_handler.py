"""
DeliverCodeHandler.

Handler for handing a code to a user.
"""

from typing import Optional

from core.infrastructure.database import RetryPolicy, code_delivery_settings
from core.infrastructure.events import event_bus
from inventory.application.commands.deliver_code import DeliverCodeCommand
from inventory.application.dto.inventory_dto import DeliveryDTO
from inventory.domain.events import CodeDelivered
from inventory.domain.services import CodeAllocator
from inventory.ports.code_repository import CodeRepository
from inventory.ports.delivery_repository import DeliveryRepository
from products.ports.product_repository import ProductRepository


class DeliverCodeHandler:
    """Handler for DeliverCodeCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        code_repository: CodeRepository,
        delivery_repository: DeliveryRepository,
        retry_policy: Optional[RetryPolicy] = None,
        strict_user_cap: Optional[bool] = None,
    ):
        """
        Initialize handler with repositories.

        Retry policy and strict mode default to the CODE_DELIVERY setting.
        """
        if strict_user_cap is None:
            strict_user_cap = bool(code_delivery_settings()["STRICT_USER_CAP"])
        self.allocator = CodeAllocator(
            product_repository=product_repository,
            code_repository=code_repository,
            delivery_repository=delivery_repository,
            retry_policy=retry_policy or RetryPolicy.from_settings(),
            strict_user_cap=strict_user_cap,
        )

    async def handle(self, command: DeliverCodeCommand) -> DeliveryDTO:
        """
        Handle deliver code command.

        Args:
            command: DeliverCodeCommand

        Returns:
            DeliveryDTO

        Raises:
            ProductNotFoundError: If the product is missing or inactive
            NoStockError: If no code is available
            ContentionError: If the retry ceiling was reached
        """
        outcome = await self.allocator.deliver(command.product_id, command.user)

        if outcome.is_new:
            await event_bus.publish(
                CodeDelivered(
                    product_id=command.product_id,
                    user=command.user,
                    code_id=outcome.code_id,
                    delivered_count=outcome.count,
                )
            )

        return DeliveryDTO(
            code=outcome.code,
            is_new=outcome.is_new,
            count=outcome.count,
            max=outcome.max,
        )
