"""
Product model.
"""
from django.db import models


class Product(models.Model):
    """
    A catalog entry that owns a pool of activation codes.

    ``max_per_user`` caps how many distinct codes one user can receive.
    """

    STATUS_CHOICES = [
        ("active", "Active"),
        ("inactive", "Inactive"),
    ]

    id = models.CharField(primary_key=True, max_length=100, help_text="Caller-assigned identifier")
    name = models.CharField(max_length=255, help_text="Product display name")
    description = models.TextField(null=True, blank=True)
    max_per_user = models.PositiveIntegerField(
        default=1, help_text="Maximum distinct codes a single user may receive"
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="active")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="products_status_idx"),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.id or not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name:
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} ({self.id})"
