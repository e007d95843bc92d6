"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.domain.exceptions import ProductAlreadyExistsError
from core.domain.value_objects import ProductStatus
from core.infrastructure.database import translate_store_errors
from products.domain.product import Product
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            max_per_user=model.max_per_user,
            status=ProductStatus(model.status),
            created_at=model.created_at,
        )

    @sync_to_async
    @translate_store_errors
    def create(self, product: Product) -> Product:
        """
        Insert a new product.

        Args:
            product: Product entity to insert

        Returns:
            Saved product entity
        """
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                model = ProductModel.objects.create(
                    id=product.id,
                    name=product.name,
                    description=product.description,
                    max_per_user=product.max_per_user,
                    status=product.status.value,
                )
        except IntegrityError as exc:
            raise ProductAlreadyExistsError(f"Product {product.id} already exists") from exc
        return self._to_domain(model)

    @sync_to_async
    @translate_store_errors
    def save(self, product: Product) -> Product:
        """
        Persist changes to an existing product.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        model = ProductModel.objects.get(id=product.id)  # pylint: disable=no-member
        model.name = product.name
        model.description = product.description
        model.max_per_user = product.max_per_user
        model.status = product.status.value
        model.save(update_fields=["name", "description", "max_per_user", "status"])
        return self._to_domain(model)

    @sync_to_async
    @translate_store_errors
    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product identifier

        Returns:
            Product entity or None if not found
        """
        try:
            model = ProductModel.objects.get(id=product_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except ProductModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    @translate_store_errors
    def find_active_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find an active product by ID.

        Args:
            product_id: Product identifier

        Returns:
            Product entity or None if missing or inactive
        """
        model = (
            ProductModel.objects.filter(  # pylint: disable=no-member
                id=product_id, status=ProductStatus.ACTIVE.value
            ).first()
        )
        return self._to_domain(model) if model else None

    @sync_to_async
    @translate_store_errors
    def list_all(self) -> List[Product]:
        """
        List all products, newest first.

        Returns:
            List of Product entities
        """
        models = ProductModel.objects.order_by("-created_at")  # pylint: disable=no-member
        return [self._to_domain(model) for model in models]

    @sync_to_async
    @translate_store_errors
    def exists(self, product_id: str) -> bool:
        """
        Check if a product exists.

        Args:
            product_id: Product identifier

        Returns:
            True if product exists, False otherwise
        """
        return ProductModel.objects.filter(id=product_id).exists()  # pylint: disable=no-member

    @sync_to_async
    @translate_store_errors
    def delete(self, product_id: str) -> bool:
        """
        Delete a product; codes and deliveries cascade.

        Args:
            product_id: Product identifier

        Returns:
            True if a product was deleted
        """
        deleted, _ = ProductModel.objects.filter(id=product_id).delete()  # pylint: disable=no-member
        return deleted > 0
