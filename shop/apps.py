# shop/apps.py
from django.apps import AppConfig


class ShopConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "shop"
    verbose_name = "Nirvana IoT shop"

    def ready(self):
        from . import signals  # noqa: F401
