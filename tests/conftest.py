"""
Pytest configuration and shared fixtures.
"""

import itertools
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from core.domain.value_objects import CodeStatus
from core.infrastructure.database import RetryPolicy
from inventory.domain.code import Code
from inventory.domain.delivery import DeliveryRecord
from inventory.domain.outcomes import AssignmentResult, InventoryCounts, LoadOutcome
from inventory.infrastructure.repositories.django_code_repository import DjangoCodeRepository
from inventory.infrastructure.repositories.django_delivery_repository import (
    DjangoDeliveryRepository,
)
from inventory.ports.code_repository import CodeRepository
from inventory.ports.delivery_repository import DeliveryRepository
from products.domain.product import Product
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from products.ports.product_repository import ProductRepository


# In-memory port implementations for domain service tests


class InMemoryProductRepository(ProductRepository):
    """ProductRepository backed by a dict."""

    def __init__(self):
        self.products: Dict[str, Product] = {}

    async def create(self, product):
        self.products[product.id] = product
        return product

    async def save(self, product):
        self.products[product.id] = product
        return product

    async def find_by_id(self, product_id):
        return self.products.get(product_id)

    async def find_active_by_id(self, product_id):
        product = self.products.get(product_id)
        return product if product and product.is_active() else None

    async def list_all(self):
        return sorted(self.products.values(), key=lambda p: p.created_at, reverse=True)

    async def exists(self, product_id):
        return product_id in self.products

    async def delete(self, product_id):
        return self.products.pop(product_id, None) is not None


class InMemoryStore(CodeRepository, DeliveryRepository):
    """Code pool and delivery ledger sharing one in-memory state."""

    def __init__(self):
        self.codes: Dict[int, Code] = {}
        self.deliveries: List[DeliveryRecord] = []
        self._ids = itertools.count(1)
        self.forced_results: List[AssignmentResult] = []

    def add(self, product_id: str, *values: str) -> List[Code]:
        added = []
        for value in values:
            code = replace(Code.create(product_id, value), id=next(self._ids))
            self.codes[code.id] = code
            added.append(code)
        return added

    async def list_for_user(self, product_id, user):
        return [d for d in self.deliveries if d.product_id == product_id and d.user == user]

    async def pick_available(self, product_id):
        for code in sorted(self.codes.values(), key=lambda c: c.id):
            if code.product_id == product_id and code.is_available():
                return code
        return None

    async def assign_and_record(self, code, user, user_cap=None):
        if self.forced_results:
            return self.forced_results.pop(0)
        if user_cap is not None:
            held = len(await self.list_for_user(code.product_id, user))
            if held >= user_cap:
                return AssignmentResult.CAP_REACHED
        current = self.codes.get(code.id)
        if current is None or not current.is_available():
            return AssignmentResult.LOST_RACE
        if any(
            d.product_id == code.product_id and d.user == user and d.code == code.code
            for d in self.deliveries
        ):
            return AssignmentResult.DUPLICATE_DELIVERY
        now = datetime.now(timezone.utc)
        self.codes[code.id] = current.assign(user, at=now)
        self.deliveries.append(
            DeliveryRecord(
                id=len(self.deliveries) + 1,
                product_id=code.product_id,
                user=user,
                code=code.code,
                created_at=now,
            )
        )
        return AssignmentResult.ASSIGNED

    async def insert_if_absent(self, product_id, codes):
        existing = {c.code for c in self.codes.values()}
        outcomes = []
        for value in codes:
            if value in existing:
                outcomes.append(LoadOutcome.DUPLICATE)
                continue
            existing.add(value)
            self.add(product_id, value)
            outcomes.append(LoadOutcome.INSERTED)
        return outcomes

    async def count_by_status(self, product_id):
        codes = [c for c in self.codes.values() if c.product_id == product_id]
        return InventoryCounts(
            available=sum(1 for c in codes if c.status == CodeStatus.AVAILABLE),
            assigned=sum(1 for c in codes if c.status == CodeStatus.ASSIGNED),
        )

    async def find_by_id(self, code_id):
        return self.codes.get(code_id)

    async def list_for_product(self, product_id, status=None, limit=100):
        codes = [
            c
            for c in sorted(self.codes.values(), key=lambda c: c.id, reverse=True)
            if c.product_id == product_id and (status is None or c.status == status)
        ]
        return codes[:limit]

    async def delete(self, code_id):
        return self.codes.pop(code_id, None) is not None


@pytest.fixture
def memory_products():
    """Fixture for an in-memory ProductRepository."""
    return InMemoryProductRepository()


@pytest.fixture
def memory_store():
    """Fixture for an in-memory code pool and delivery ledger."""
    return InMemoryStore()


@pytest.fixture
def fast_retry_policy():
    """Fixture for a retry policy that never sleeps."""
    return RetryPolicy(max_attempts=5, base_delay=0, max_delay=0)


# Django repositories and database fixtures


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def code_repository():
    """Fixture for CodeRepository."""
    return DjangoCodeRepository()


@pytest.fixture
def delivery_repository():
    """Fixture for DeliveryRepository."""
    return DjangoDeliveryRepository()


@pytest.fixture
def make_product(db):
    """Factory fixture creating Product rows through the ORM."""
    from products.infrastructure.models import Product as ProductModel

    def _make(
        product_id: str = "prod-1",
        max_per_user: int = 1,
        status: str = "active",
        name: Optional[str] = None,
    ):
        return ProductModel.objects.create(
            id=product_id,
            name=name or f"Product {product_id}",
            max_per_user=max_per_user,
            status=status,
        )

    return _make


@pytest.fixture
def make_codes(db):
    """Factory fixture creating available Code rows through the ORM."""
    from inventory.infrastructure.models import Code as CodeModel

    def _make(product, *values: str):
        return [CodeModel.objects.create(product=product, code=value) for value in values]

    return _make


@pytest.fixture
def create_product(db):
    """Async factory fixture creating Product rows from inside async tests."""
    from products.infrastructure.models import Product as ProductModel

    async def _create(product_id: str = "prod-1", max_per_user: int = 1, status: str = "active"):
        return await ProductModel.objects.acreate(
            id=product_id,
            name=f"Product {product_id}",
            max_per_user=max_per_user,
            status=status,
        )

    return _create


@pytest.fixture
def create_codes(db):
    """Async factory fixture creating available Code rows from inside async tests."""
    from inventory.infrastructure.models import Code as CodeModel

    async def _create(product, *values: str):
        return [await CodeModel.objects.acreate(product=product, code=value) for value in values]

    return _create


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
