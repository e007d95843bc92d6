"""
Django admin configuration for inventory app.
"""
from django.contrib import admin
from django.utils.html import format_html

from inventory.infrastructure.models import Code, Delivery


@admin.register(Code)
class CodeAdmin(admin.ModelAdmin):
    """Admin interface for Code model."""

    list_display = ["id", "product", "status_display", "assigned_to", "assigned_at", "created_at"]
    list_filter = ["status", "product", "created_at"]
    search_fields = ["assigned_to", "product__id", "product__name"]
    readonly_fields = ["id", "created_at"]

    def status_display(self, obj):
        """Display status with color coding."""
        color = "green" if obj.status == "available" else "gray"
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            obj.status.upper(),
        )

    status_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("product")


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    """Admin interface for the delivery ledger; rows are read-only."""

    list_display = ["id", "product", "user", "created_at"]
    list_filter = ["product", "created_at"]
    search_fields = ["user", "product__id"]
    readonly_fields = ["id", "product", "user", "code", "created_at"]

    def has_add_permission(self, request):
        """Ledger rows are only written by deliveries."""
        return False

    def has_change_permission(self, request, obj=None):
        """Ledger rows are append-only."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("product")
