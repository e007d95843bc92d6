from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.CharField(
                        help_text="Caller-assigned identifier",
                        max_length=100,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(help_text="Product display name", max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "max_per_user",
                    models.PositiveIntegerField(
                        default=1,
                        help_text="Maximum distinct codes a single user may receive",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("inactive", "Inactive")],
                        default="active",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status"], name="products_status_idx")],
            },
        ),
    ]
