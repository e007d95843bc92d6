import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Code",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "code",
                    models.CharField(
                        help_text="Opaque code string, unique across products",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("assigned", "Assigned")],
                        default="available",
                        max_length=20,
                    ),
                ),
                ("assigned_to", models.CharField(blank=True, max_length=255, null=True)),
                ("assigned_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="codes",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "codes",
                "ordering": ["-id"],
                "indexes": [models.Index(fields=["product", "status"], name="codes_product_status_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(
                                ("assigned_at__isnull", True),
                                ("assigned_to__isnull", True),
                                ("status", "available"),
                            ),
                            models.Q(
                                ("assigned_at__isnull", False),
                                ("assigned_to__isnull", False),
                                ("status", "assigned"),
                            ),
                            _connector="OR",
                        ),
                        name="code_assignment_consistent",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Delivery",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("user", models.CharField(help_text="Opaque end-user identifier", max_length=255)),
                ("code", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="deliveries",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "deliveries",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["product", "user"], name="deliveries_product_user_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("product", "user", "code"),
                        name="unique_delivery_per_user_code",
                    )
                ],
            },
        ),
    ]
