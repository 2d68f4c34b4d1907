# shop/admin.py
from django.contrib import admin

from .models import Category, Order, OrderStatus, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name_ar", "name_en", "order", "is_active", "created_at")
    list_editable = ("order", "is_active")
    search_fields = ("name_ar", "name_en")
    ordering = ("order",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name_ar", "name_en", "category", "price", "show_price", "is_active")
    list_filter = ("category", "is_active", "show_price")
    search_fields = ("name_ar", "name_en")
    ordering = ("-created_at",)
    autocomplete_fields = ("category",)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "product_name", "customer_name", "phone", "country", "status", "created_at")
    list_filter = ("status", "country")
    search_fields = ("id", "product_name", "customer_name", "phone", "whatsapp")
    readonly_fields = ("created_at", "product_name")
    ordering = ("-created_at",)

    actions = ["mark_processing", "mark_completed", "mark_cancelled"]

    def _set_status(self, request, queryset, status):
        updated = queryset.update(status=status)
        self.message_user(request, f"{updated} order(s) marked {status}.")

    def mark_processing(self, request, queryset):
        self._set_status(request, queryset, OrderStatus.PROCESSING)
    mark_processing.short_description = "Mark as processing"

    def mark_completed(self, request, queryset):
        self._set_status(request, queryset, OrderStatus.COMPLETED)
    mark_completed.short_description = "Mark as completed"

    def mark_cancelled(self, request, queryset):
        self._set_status(request, queryset, OrderStatus.CANCELLED)
    mark_cancelled.short_description = "Mark as cancelled"
