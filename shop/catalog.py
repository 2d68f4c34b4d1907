# shop/catalog.py
import logging

from django.db import DatabaseError

from .exceptions import BackendError
from .locale import AR
from .models import Category, Product

logger = logging.getLogger(__name__)


def _same_id(value, category_id):
    return str(value) == str(category_id)


class CatalogStore:
    """
    Snapshot of the active categories and products for one page.

    Filtering and counting work on the snapshot only; ``refresh`` replaces it
    wholesale from the database.
    """

    def __init__(self, categories=(), products=()):
        self._categories = list(categories)
        self._products = list(products)

    @classmethod
    def load(cls):
        store = cls()
        store.refresh()
        return store

    def refresh(self):
        try:
            categories = list(Category.objects.filter(is_active=True).order_by("order"))
            products = list(Product.objects.filter(is_active=True).order_by("-created_at"))
        except DatabaseError as exc:
            logger.exception("Could not load the catalog")
            raise BackendError("catalog unavailable") from exc
        self._categories = categories
        self._products = products
        logger.debug("Catalog loaded: %d categories, %d products", len(categories), len(products))
        return self

    def list_categories(self):
        return list(self._categories)

    def list_products(self):
        return list(self._products)

    def products_by_category(self, category_id):
        if not category_id:
            return list(self._products)
        return [p for p in self._products if _same_id(p.category_id, category_id)]

    def count_by_category(self, category_id):
        return sum(1 for p in self._products if _same_id(p.category_id, category_id))

    def get_category(self, category_id):
        for category in self._categories:
            if _same_id(category.pk, category_id):
                return category
        return None

    def get_category_name(self, category_id, language=AR):
        category = self.get_category(category_id)
        return category.name_for(language) if category else ""

    def get_product(self, product_id):
        for product in self._products:
            if _same_id(product.pk, product_id):
                return product
        return None
