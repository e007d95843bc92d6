"""
Django admin configuration for products app.
"""
from django.contrib import admin

from products.infrastructure.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["id", "name", "max_per_user", "status", "available_codes", "created_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["id", "name"]
    readonly_fields = ["created_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "description", "status"),
            },
        ),
        (
            "Delivery",
            {
                "fields": ("max_per_user",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at",),
                "classes": ("collapse",),
            },
        ),
    )

    def available_codes(self, obj):
        """Display number of codes still available."""
        return obj.codes.filter(status="available").count()

    available_codes.short_description = "Available"
