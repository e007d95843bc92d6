"""
Code and Delivery models.
"""
from django.db import models
from django.db.models import Q
from django.utils import timezone


class Code(models.Model):
    """
    A single-use activation code belonging to one product.

    A code is either available or assigned; assigned codes always carry
    the user and the time of assignment.
    """

    STATUS_CHOICES = [
        ("available", "Available"),
        ("assigned", "Assigned"),
    ]

    id = models.BigAutoField(primary_key=True)
    product = models.ForeignKey("products.Product", on_delete=models.CASCADE, related_name="codes")
    code = models.CharField(max_length=255, unique=True, help_text="Opaque code string, unique across products")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="available")
    assigned_to = models.CharField(max_length=255, null=True, blank=True)
    assigned_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "codes"
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["product", "status"], name="codes_product_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(status="available", assigned_to__isnull=True, assigned_at__isnull=True)
                    | Q(status="assigned", assigned_to__isnull=False, assigned_at__isnull=False)
                ),
                name="code_assignment_consistent",
            ),
        ]

    def __str__(self):
        return f"{self.code} ({self.status})"


class Delivery(models.Model):
    """
    Ledger row recording that a code was handed to a user.

    Rows are only ever appended; the auto id gives the insertion order.
    """

    id = models.BigAutoField(primary_key=True)
    product = models.ForeignKey("products.Product", on_delete=models.CASCADE, related_name="deliveries")
    user = models.CharField(max_length=255, help_text="Opaque end-user identifier")
    code = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "deliveries"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["product", "user"], name="deliveries_product_user_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["product", "user", "code"], name="unique_delivery_per_user_code"),
        ]

    def __str__(self):
        return f"{self.user} <- {self.code}"
