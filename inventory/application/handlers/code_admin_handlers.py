"""
Code administration handlers.

Handlers for listing, manually assigning and deleting codes.
"""

import logging
from typing import List

from core.domain.exceptions import CodeNotFoundError
from core.infrastructure.database import RetryPolicy
from core.infrastructure.events import event_bus
from inventory.application.commands.manage_code import AssignCodeCommand, DeleteCodeCommand
from inventory.application.dto.inventory_dto import CodeDTO
from inventory.application.queries.list_codes import ListCodesQuery
from inventory.domain.events import CodeAssigned
from inventory.domain.services import CodeAllocator
from inventory.ports.code_repository import CodeRepository
from inventory.ports.delivery_repository import DeliveryRepository
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListCodesHandler:
    """Handler for ListCodesQuery."""

    def __init__(self, code_repository: CodeRepository):
        """Initialize handler with repository."""
        self.code_repository = code_repository

    async def handle(self, query: ListCodesQuery) -> List[CodeDTO]:
        """
        List a product's newest codes.

        Args:
            query: ListCodesQuery

        Returns:
            List of CodeDTO, newest first
        """
        codes = await self.code_repository.list_for_product(
            query.product_id, status=query.status, limit=query.limit
        )
        return [CodeDTO.from_entity(code) for code in codes]


class AssignCodeHandler:
    """Handler for AssignCodeCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        code_repository: CodeRepository,
        delivery_repository: DeliveryRepository,
    ):
        """Initialize handler with repositories."""
        self.allocator = CodeAllocator(
            product_repository=product_repository,
            code_repository=code_repository,
            delivery_repository=delivery_repository,
            retry_policy=RetryPolicy(max_attempts=1),
        )

    async def handle(self, command: AssignCodeCommand) -> CodeDTO:
        """
        Assign a specific code to a user.

        Args:
            command: AssignCodeCommand

        Returns:
            CodeDTO of the assigned code

        Raises:
            CodeNotFoundError: If the code does not exist
            CodeAlreadyAssignedError: If the code is not available
        """
        code = await self.allocator.assign(command.code_id, command.user)

        await event_bus.publish(CodeAssigned(product_id=code.product_id, user=code.assigned_to, code_id=code.id))
        return CodeDTO.from_entity(code)


class DeleteCodeHandler:
    """Handler for DeleteCodeCommand."""

    def __init__(self, code_repository: CodeRepository):
        """Initialize handler with repository."""
        self.code_repository = code_repository

    async def handle(self, command: DeleteCodeCommand) -> None:
        """
        Delete a code.

        Raises:
            CodeNotFoundError: If the code does not exist
        """
        deleted = await self.code_repository.delete(command.code_id)
        if not deleted:
            raise CodeNotFoundError(f"Code {command.code_id} not found")
        logger.info("Code deleted", extra={"code_id": command.code_id})
