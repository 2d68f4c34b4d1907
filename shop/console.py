# shop/console.py
"""
Back-office operations on categories, products and orders.

Each mutation returns an ``Outcome``. A successful mutation is followed by a
full reload of the three collections; a failed one leaves the snapshot as it
was and carries a message for the user.
"""
import logging
from dataclasses import dataclass, field

from django.db import DatabaseError
from django.db.models import ProtectedError

from .exceptions import BackendError
from .locale import Bilingual, LocaleContext
from .models import Category, Order, OrderStatus, Product

logger = logging.getLogger(__name__)

NO_CATEGORY = "بدون فئة"

MESSAGES = {
    "saved": Bilingual("تم الحفظ بنجاح", "Saved successfully"),
    "deleted": Bilingual("تم الحذف بنجاح", "Deleted successfully"),
    "category_in_use": Bilingual(
        "لا يمكن حذف الفئة لأنها تحتوي على منتجات. قم بنقل أو حذف المنتجات أولاً.",
        "This category still has products. Move or delete them first.",
    ),
    "bad_status": Bilingual("حالة الطلب غير معروفة", "Unknown order status"),
    "not_found": Bilingual("العنصر غير موجود", "Item not found"),
    "failed": Bilingual("تعذر تنفيذ العملية، يرجى المحاولة مرة أخرى", "The operation failed, please try again"),
}

CATEGORY_FIELDS = ["name_ar", "name_en", "image_url", "is_active", "order"]
PRODUCT_FIELDS = ["category", "image_url", "name_ar", "name_en", "price", "show_price", "is_active"]


@dataclass
class Outcome:
    ok: bool
    message: str = ""
    obj: object = None

    @property
    def failed(self):
        return not self.ok


@dataclass
class ConsoleSnapshot:
    categories: list = field(default_factory=list)
    products: list = field(default_factory=list)
    orders: list = field(default_factory=list)

    @classmethod
    def fetch(cls):
        try:
            return cls(
                categories=list(Category.objects.order_by("order")),
                products=list(Product.objects.select_related("category").order_by("-created_at")),
                orders=list(Order.objects.order_by("-created_at")),
            )
        except DatabaseError as exc:
            logger.exception("Could not load the back-office data")
            raise BackendError("back office unavailable") from exc


class BackofficeConsole:
    def __init__(self, locale=None, snapshot=None):
        self.locale = locale or LocaleContext()
        self.snapshot = snapshot or ConsoleSnapshot()

    @classmethod
    def load(cls, locale=None):
        console = cls(locale)
        console.refresh()
        return console

    def refresh(self):
        self.snapshot = ConsoleSnapshot.fetch()
        return self.snapshot

    # -- helpers -----------------------------------------------------------

    def _ok(self, key, obj=None):
        return Outcome(True, self.locale.t(MESSAGES[key]), obj)

    def _fail(self, key):
        return Outcome(False, self.locale.t(MESSAGES[key]))

    def _mutate(self, action, description, success_key="saved"):
        try:
            obj = action()
        except ProtectedError:
            raise
        except DatabaseError:
            logger.exception("Back-office %s failed", description)
            return self._fail("failed")
        logger.info("Back-office %s done", description)
        try:
            self.refresh()
        except BackendError:
            return self._fail("failed")
        return self._ok(success_key, obj)

    def get_category_name(self, category_id):
        for category in self.snapshot.categories:
            if str(category.pk) == str(category_id):
                return category.name_ar
        return NO_CATEGORY

    def products_in_category(self, category_id):
        return [p for p in self.snapshot.products if str(p.category_id) == str(category_id)]

    def next_category_order(self):
        return len(self.snapshot.categories)

    # -- categories ------------------------------------------------------

    def create_category(self, data):
        values = {k: data[k] for k in CATEGORY_FIELDS if k in data}
        if not values.get("order"):
            values["order"] = self.next_category_order()
        return self._mutate(lambda: Category.objects.create(**values), "category create")

    def update_category(self, category_id, data):
        values = {k: data[k] for k in CATEGORY_FIELDS if k in data}

        def action():
            updated = Category.objects.filter(pk=category_id).update(**values)
            if not updated:
                raise Category.DoesNotExist
            return category_id

        try:
            return self._mutate(action, f"category {category_id} update")
        except Category.DoesNotExist:
            return self._fail("not_found")

    def delete_category(self, category_id):
        if self.products_in_category(category_id):
            logger.info("Refused to delete category %s: products still reference it", category_id)
            return self._fail("category_in_use")
        try:
            return self._mutate(
                lambda: Category.objects.filter(pk=category_id).delete(),
                f"category {category_id} delete", "deleted",
            )
        except ProtectedError:
            # A product was added after the snapshot was taken
            return self._fail("category_in_use")

    # -- products --------------------------------------------------------

    def create_product(self, data):
        values = {k: data[k] for k in PRODUCT_FIELDS if k in data}
        return self._mutate(lambda: Product.objects.create(**values), "product create")

    def update_product(self, product_id, data):
        values = {k: data[k] for k in PRODUCT_FIELDS if k in data}

        def action():
            updated = Product.objects.filter(pk=product_id).update(**values)
            if not updated:
                raise Product.DoesNotExist
            return product_id

        try:
            return self._mutate(action, f"product {product_id} update")
        except Product.DoesNotExist:
            return self._fail("not_found")

    def delete_product(self, product_id):
        return self._mutate(
            lambda: Product.objects.filter(pk=product_id).delete(),
            f"product {product_id} delete", "deleted",
        )

    def toggle_product_active(self, product_id):
        def action():
            product = Product.objects.get(pk=product_id)
            product.is_active = not product.is_active
            product.save(update_fields=["is_active"])
            return product

        try:
            return self._mutate(action, f"product {product_id} toggle")
        except Product.DoesNotExist:
            return self._fail("not_found")

    # -- orders ----------------------------------------------------------

    def update_order_status(self, order_id, status):
        # Any status may follow any other
        if status not in OrderStatus.values:
            return self._fail("bad_status")
        return self._mutate(
            lambda: Order.objects.filter(pk=order_id).update(status=status),
            f"order {order_id} status -> {status}",
        )

    def delete_order(self, order_id):
        return self._mutate(
            lambda: Order.objects.filter(pk=order_id).delete(),
            f"order {order_id} delete", "deleted",
        )
