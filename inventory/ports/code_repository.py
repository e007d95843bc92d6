"""
Code repository port (interface).

This defines the contract for code pool persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from core.domain.value_objects import CodeStatus
from inventory.domain.code import Code
from inventory.domain.outcomes import AssignmentResult, InventoryCounts, LoadOutcome


class CodeRepository(ABC):
    """
    Abstract repository for Code entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def pick_available(self, product_id: str) -> Optional[Code]:
        """
        Return any available code of a product.

        Args:
            product_id: Product identifier

        Returns:
            An available Code or None when the pool is empty
        """
        pass

    @abstractmethod
    async def assign_and_record(self, code: Code, user: str, user_cap: Optional[int] = None) -> AssignmentResult:
        """
        Atomically mark a code assigned and append the delivery record.

        The update only applies while the code is still available, and the
        ledger insert is guarded by the (product, user, code) uniqueness
        constraint. Either both writes commit or neither does.

        Args:
            code: Code picked by the caller
            user: Receiving user
            user_cap: When set, lock the product and re-count the user's
                deliveries inside the transaction before assigning

        Returns:
            AssignmentResult describing what happened
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, product_id: str, codes: Sequence[str]) -> List[LoadOutcome]:
        """
        Insert each value as an available code unless it already exists.

        Each insert is independent; a value repeated within ``codes`` is a
        duplicate after its first occurrence.

        Args:
            product_id: Owning product
            codes: Code strings, in input order

        Returns:
            One LoadOutcome per input value
        """
        pass

    @abstractmethod
    async def count_by_status(self, product_id: str) -> InventoryCounts:
        """
        Count a product's codes by status.

        Args:
            product_id: Product identifier

        Returns:
            InventoryCounts (zeros for an unknown product)
        """
        pass

    @abstractmethod
    async def find_by_id(self, code_id: int) -> Optional[Code]:
        """
        Find a code by ID.

        Args:
            code_id: Code id

        Returns:
            Code entity or None if not found
        """
        pass

    @abstractmethod
    async def list_for_product(
        self, product_id: str, status: Optional[CodeStatus] = None, limit: int = 100
    ) -> List[Code]:
        """
        List a product's newest codes.

        Args:
            product_id: Product identifier
            status: Optional status filter
            limit: Maximum number of codes

        Returns:
            List of Code entities, newest first
        """
        pass

    @abstractmethod
    async def delete(self, code_id: int) -> bool:
        """
        Delete a code.

        Args:
            code_id: Code id

        Returns:
            True if a code was deleted
        """
        pass
