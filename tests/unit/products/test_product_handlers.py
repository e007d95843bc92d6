"""
Unit tests for product administration handlers.
"""
import pytest

from core.domain.exceptions import (
    InvalidProductUpdateError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from core.domain.value_objects import ProductStatus
from core.infrastructure.events import event_bus
from products.application.commands.manage_product import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated


class DuplicateRejectingRepository:
    """Wraps the in-memory repository with the create() uniqueness check."""

    def __init__(self, inner):
        self.inner = inner

    def __getattr__(self, name):
        return getattr(self.inner, name)

    async def create(self, product):
        if product.id in self.inner.products:
            raise ProductAlreadyExistsError(f"Product {product.id} already exists")
        return await self.inner.create(product)


@pytest.fixture
def published(monkeypatch):
    """Capture events published on the global event bus."""
    events = []

    async def fake_publish(event):
        events.append(event)

    monkeypatch.setattr(event_bus, "publish", fake_publish)
    return events


@pytest.mark.asyncio
class TestProductHandlers:
    """Tests for product handlers."""

    async def test_create_product(self, memory_products, published):
        """Creating a product stores it and publishes ProductCreated."""
        handler = CreateProductHandler(memory_products)
        dto = await handler.handle(CreateProductCommand(product_id="p1", name="Product", max_per_user=2))

        assert dto.id == "p1"
        assert dto.status == "active"
        assert await memory_products.exists("p1")
        assert isinstance(published[0], ProductCreated)

    async def test_create_duplicate(self, memory_products, published):
        """A taken id is rejected."""
        repository = DuplicateRejectingRepository(memory_products)
        handler = CreateProductHandler(repository)
        await handler.handle(CreateProductCommand(product_id="p1", name="Product"))

        with pytest.raises(ProductAlreadyExistsError):
            await handler.handle(CreateProductCommand(product_id="p1", name="Again"))

    async def test_update_product(self, memory_products, published):
        """A partial update changes only the given fields."""
        await CreateProductHandler(memory_products).handle(CreateProductCommand(product_id="p1", name="Product"))

        dto = await UpdateProductHandler(memory_products).handle(
            UpdateProductCommand(product_id="p1", max_per_user=3, status=ProductStatus.INACTIVE)
        )

        assert dto.max_per_user == 3
        assert dto.status == "inactive"
        assert dto.name == "Product"
        assert isinstance(published[-1], ProductUpdated)
        assert published[-1].changed_fields == ["max_per_user", "status"]

    async def test_update_clears_description(self, memory_products, published):
        """Clearing the description counts as a change."""
        await CreateProductHandler(memory_products).handle(
            CreateProductCommand(product_id="p1", name="Product", description="old")
        )

        dto = await UpdateProductHandler(memory_products).handle(
            UpdateProductCommand(product_id="p1", clear_description=True)
        )

        assert dto.description is None
        assert published[-1].changed_fields == ["description"]

    async def test_update_without_changes(self, memory_products):
        """An empty update is rejected before any lookup."""
        with pytest.raises(InvalidProductUpdateError):
            await UpdateProductHandler(memory_products).handle(UpdateProductCommand(product_id="p1"))

    async def test_update_unknown_product(self, memory_products):
        """Updating a missing product fails."""
        with pytest.raises(ProductNotFoundError):
            await UpdateProductHandler(memory_products).handle(UpdateProductCommand(product_id="nope", name="X"))

    async def test_delete_product(self, memory_products, published):
        """Deleting removes the product and publishes ProductDeleted."""
        await CreateProductHandler(memory_products).handle(CreateProductCommand(product_id="p1", name="Product"))

        await DeleteProductHandler(memory_products).handle(DeleteProductCommand(product_id="p1"))

        assert not await memory_products.exists("p1")
        assert isinstance(published[-1], ProductDeleted)

    async def test_delete_unknown_product(self, memory_products):
        """Deleting a missing product fails."""
        with pytest.raises(ProductNotFoundError):
            await DeleteProductHandler(memory_products).handle(DeleteProductCommand(product_id="nope"))

    async def test_list_products(self, memory_products, published):
        """Listing returns DTOs for every product."""
        create = CreateProductHandler(memory_products)
        await create.handle(CreateProductCommand(product_id="p1", name="One"))
        await create.handle(CreateProductCommand(product_id="p2", name="Two"))

        products = await ListProductsHandler(memory_products).handle()

        assert {p.id for p in products} == {"p1", "p2"}
