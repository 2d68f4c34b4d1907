# shop/models.py
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from .locale import EN


class Category(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name_ar = models.CharField("Name (AR)", max_length=120)
    name_en = models.CharField("Name (EN)", max_length=120)
    image_url = models.URLField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True)
    # Sort key among active categories, not unique
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["order"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name_en or self.name_ar

    def name_for(self, language):
        return self.name_en if language == EN else self.name_ar


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="products")
    image_url = models.URLField(max_length=500, blank=True)
    name_ar = models.CharField(max_length=200)
    name_en = models.CharField(max_length=200)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(0)],
    )
    show_price = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.name_en or self.name_ar

    def name_for(self, language):
        return self.name_en if language == EN else self.name_ar

    @property
    def display_price(self):
        # show_price without a price is tolerated: nothing is displayed
        if self.show_price and self.price is not None:
            return self.price
        return None


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PROCESSING = "processing", "Processing"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class Order(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Plain reference: deleting the product keeps the id and the name snapshot
    product = models.ForeignKey(
        Product, on_delete=models.DO_NOTHING, db_constraint=False, related_name="orders",
    )
    product_name = models.CharField(max_length=200)
    customer_name = models.CharField(max_length=200)
    address = models.TextField()
    phone = models.CharField(max_length=32)
    whatsapp = models.CharField(max_length=32)
    country = models.CharField(max_length=2, blank=True)
    status = models.CharField(max_length=12, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Order {self.id.hex[:8]} - {self.product_name} - {self.status}"
