"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from products.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Insert a new product.

        Args:
            product: Product entity to insert

        Returns:
            Saved product entity

        Raises:
            ProductAlreadyExistsError: If the id is taken
        """
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Persist changes to an existing product.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find a product by ID regardless of status.

        Args:
            product_id: Product identifier

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def find_active_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find a product by ID only if it is active.

        Args:
            product_id: Product identifier

        Returns:
            Product entity or None if missing or inactive
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """
        List all products, newest first.

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def exists(self, product_id: str) -> bool:
        """
        Check if a product exists.

        Args:
            product_id: Product identifier

        Returns:
            True if product exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        """
        Delete a product together with its codes and deliveries.

        Args:
            product_id: Product identifier

        Returns:
            True if a product was deleted
        """
        pass
