# shop/api.py
import json
import uuid

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .catalog import CatalogStore
from .countries import search_countries
from .exceptions import BackendError
from .intake import IntakeState, OrderIntake
from .locale import LocaleContext, LANGUAGES, locale_from_request
from .models import Product


def category_payload(category, language, count):
    return {
        "id": str(category.pk),
        "name": category.name_for(language),
        "name_ar": category.name_ar,
        "name_en": category.name_en,
        "image_url": category.image_url,
        "order": category.order,
        "product_count": count,
    }


def product_payload(product, language):
    price = product.display_price
    return {
        "id": str(product.pk),
        "category_id": str(product.category_id),
        "name": product.name_for(language),
        "name_ar": product.name_ar,
        "name_en": product.name_en,
        "image_url": product.image_url,
        "price": float(price) if price is not None else None,
    }


@require_GET
def catalog(request):
    locale = locale_from_request(request)
    try:
        store = CatalogStore.load()
    except BackendError:
        return JsonResponse({"ok": False, "error": "catalog unavailable"}, status=503)
    selected = request.GET.get("category") or None
    return JsonResponse({
        "ok": True,
        "categories": [
            category_payload(c, locale.language, store.count_by_category(c.pk)) for c in store.list_categories()
        ],
        "products": [product_payload(p, locale.language) for p in store.products_by_category(selected)],
    })


@require_GET
def countries(request):
    locale = locale_from_request(request)
    return JsonResponse({
        "countries": [
            dict(c.as_dict(), label=c.label(locale.language)) for c in search_countries(request.GET.get("q", ""))
        ],
    })


@csrf_exempt
@require_POST
def order_create(request):
    try:
        data = json.loads(request.body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return JsonResponse({"ok": False, "error": "invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"ok": False, "error": "invalid JSON"}, status=400)

    locale = locale_from_request(request)
    if data.get("language") in LANGUAGES:
        locale = LocaleContext(data["language"])

    product = Product.objects.filter(pk=_as_uuid(data.get("product_id")), is_active=True).first()
    if product is None:
        return JsonResponse({"ok": False, "error": "product not found"}, status=404)

    intake = OrderIntake(locale)
    intake.open(product)
    intake.fill(data)
    state = intake.submit()

    if state is IntakeState.SUCCESS:
        return JsonResponse({
            "ok": True,
            "state": state.value,
            "order_id": str(intake.order.pk),
            "message": intake.success_message,
        }, status=201)
    if state is IntakeState.FAILED:
        return JsonResponse({"ok": False, "state": state.value, "error": intake.failure}, status=503)
    return JsonResponse({"ok": False, "state": state.value, "errors": intake.errors}, status=400)


def _as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None
