"""
LoadCodesHandler.

Handler for bulk loading codes.
"""

from core.infrastructure.events import event_bus
from inventory.application.commands.load_codes import LoadCodesCommand
from inventory.application.dto.inventory_dto import LoadResultDTO
from inventory.domain.events import CodesLoaded
from inventory.domain.services import CodeLoader
from inventory.ports.code_repository import CodeRepository
from products.ports.product_repository import ProductRepository


class LoadCodesHandler:
    """Handler for LoadCodesCommand."""

    def __init__(self, product_repository: ProductRepository, code_repository: CodeRepository):
        """Initialize handler with repositories."""
        self.loader = CodeLoader(product_repository, code_repository)

    async def handle(self, command: LoadCodesCommand) -> LoadResultDTO:
        """
        Handle load codes command.

        Args:
            command: LoadCodesCommand

        Returns:
            LoadResultDTO with inserted and duplicate counts

        Raises:
            ProductNotFoundError: If the product does not exist
            InvalidCodeValueError: If a value is empty or too long
        """
        summary = await self.loader.load(command.product_id, command.codes)

        await event_bus.publish(
            CodesLoaded(
                product_id=command.product_id,
                inserted=summary.inserted,
                duplicates=summary.duplicates,
            )
        )

        return LoadResultDTO(
            product_id=command.product_id,
            inserted=summary.inserted,
            duplicates=summary.duplicates,
        )
