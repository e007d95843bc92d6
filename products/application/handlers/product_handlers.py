"""
Product administration handlers.

Handlers for listing, creating, updating and deleting products.
"""

import logging
from typing import List

from core.domain.exceptions import InvalidProductUpdateError, ProductNotFoundError
from core.infrastructure.events import event_bus
from products.application.commands.manage_product import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from products.application.dto.product_dto import ProductDTO
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:
    """Handler returning the whole catalog."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self) -> List[ProductDTO]:
        """
        List products, newest first.

        Returns:
            List of ProductDTO
        """
        products = await self.product_repository.list_all()
        return [ProductDTO.from_entity(product) for product in products]


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """
        Create a product.

        Args:
            command: CreateProductCommand

        Returns:
            ProductDTO of the created product

        Raises:
            ProductAlreadyExistsError: If the id is already used
        """
        product = Product.create(
            product_id=command.product_id,
            name=command.name,
            description=command.description,
            max_per_user=command.max_per_user,
        )
        saved = await self.product_repository.create(product)
        logger.info("Product created", extra={"product_id": saved.id})

        await event_bus.publish(ProductCreated(product_id=saved.id, max_per_user=saved.max_per_user))
        return ProductDTO.from_entity(saved)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """
        Apply a partial update to a product.

        Args:
            command: UpdateProductCommand

        Returns:
            ProductDTO of the updated product

        Raises:
            InvalidProductUpdateError: If the command changes nothing
            ProductNotFoundError: If the product does not exist
        """
        if not command.has_changes():
            raise InvalidProductUpdateError("Nothing to update")

        product = await self.product_repository.find_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError(f"Product {command.product_id} not found")

        updated = product.update(
            name=command.name,
            description=command.description,
            max_per_user=command.max_per_user,
            status=command.status,
            clear_description=command.clear_description,
        )
        saved = await self.product_repository.save(updated)

        changed = [
            field
            for field in ("name", "description", "max_per_user", "status")
            if getattr(command, field) is not None
            or (field == "description" and command.clear_description)
        ]
        await event_bus.publish(ProductUpdated(product_id=saved.id, changed_fields=changed))
        return ProductDTO.from_entity(saved)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        deleted = await self.product_repository.delete(command.product_id)
        if not deleted:
            raise ProductNotFoundError(f"Product {command.product_id} not found")

        logger.info("Product deleted", extra={"product_id": command.product_id})
        await event_bus.publish(ProductDeleted(product_id=command.product_id))
