"""
GetInventoryStatusHandler.

Handler for the inventory status query.
"""

from inventory.application.dto.inventory_dto import InventoryStatusDTO
from inventory.application.queries.get_inventory_status import GetInventoryStatusQuery
from inventory.domain.services import InventoryReporter
from inventory.ports.code_repository import CodeRepository


class GetInventoryStatusHandler:
    """Handler for GetInventoryStatusQuery."""

    def __init__(self, code_repository: CodeRepository):
        """Initialize handler with repository."""
        self.reporter = InventoryReporter(code_repository)

    async def handle(self, query: GetInventoryStatusQuery) -> InventoryStatusDTO:
        """
        Handle get inventory status query.

        Args:
            query: GetInventoryStatusQuery

        Returns:
            InventoryStatusDTO; zero counts for an unknown product
        """
        counts = await self.reporter.status(query.product_id)
        return InventoryStatusDTO(
            product_id=query.product_id,
            available=counts.available,
            assigned=counts.assigned,
        )
