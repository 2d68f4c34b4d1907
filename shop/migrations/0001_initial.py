import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name_ar", models.CharField(max_length=120, verbose_name="Name (AR)")),
                ("name_en", models.CharField(max_length=120, verbose_name="Name (EN)")),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("is_active", models.BooleanField(default=True)),
                ("order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["order"],
                "verbose_name_plural": "categories",
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("name_ar", models.CharField(max_length=200)),
                ("name_en", models.CharField(max_length=200)),
                ("price", models.DecimalField(
                    blank=True, decimal_places=2, max_digits=10, null=True,
                    validators=[django.core.validators.MinValueValidator(0)],
                )),
                ("show_price", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("category", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT, related_name="products", to="shop.category",
                )),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("product_name", models.CharField(max_length=200)),
                ("customer_name", models.CharField(max_length=200)),
                ("address", models.TextField()),
                ("phone", models.CharField(max_length=32)),
                ("whatsapp", models.CharField(max_length=32)),
                ("country", models.CharField(blank=True, max_length=2)),
                ("status", models.CharField(
                    choices=[
                        ("pending", "Pending"),
                        ("processing", "Processing"),
                        ("completed", "Completed"),
                        ("cancelled", "Cancelled"),
                    ],
                    default="pending",
                    max_length=12,
                )),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("product", models.ForeignKey(
                    db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="orders", to="shop.product",
                )),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
