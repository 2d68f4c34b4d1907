# shop/views.py
from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST, require_http_methods

from .auth import sign_in, sign_out, staff_required
from .catalog import CatalogStore
from .console import BackofficeConsole
from .countries import COUNTRIES
from .exceptions import BackendError
from .forms import CategoryForm, LoginForm, OrderStatusForm, ProductForm
from .intake import SUCCESS_DISPLAY_SECONDS, IntakeState, OrderIntake
from .locale import apply_locale, locale_from_request
from .models import Category, Order, OrderStatus, Product

TABS = ("categories", "products", "orders")


# ---------------------------------------------------------------- public pages

def home(request):
    return render(request, "shop/home.html")


def services(request):
    return render(request, "shop/services.html")


def contact(request):
    return render(request, "shop/contact.html")


def toggle_language(request):
    locale = locale_from_request(request).toggled()
    target = request.GET.get("next") or request.POST.get("next") or ""
    if not url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        target = reverse("shop:home")
    return apply_locale(redirect(target), locale)


def product_list(request):
    """
    Storefront.
    - /products/                 : every active product
    - /products/?category=<id>   : pre-filtered on one category
    """
    selected = (request.GET.get("category") or "").strip() or None
    try:
        store = CatalogStore.load()
    except BackendError:
        return render(request, "shop/product_list.html", {"load_failed": True}, status=503)

    if selected and store.get_category(selected) is None:
        selected = None
    categories = [(c, store.count_by_category(c.pk)) for c in store.list_categories()]
    return render(request, "shop/product_list.html", {
        "categories": categories,
        "products": store.products_by_category(selected),
        "total": len(store.list_products()),
        "selected_category": selected,
    })


@require_http_methods(["GET", "POST"])
def order_create(request, pk):
    product = get_object_or_404(Product, pk=pk, is_active=True)
    intake = OrderIntake(locale_from_request(request))
    intake.open(product)

    status = 200
    if request.method == "POST":
        intake.fill(request.POST)
        state = intake.submit()
        if state is IntakeState.SUCCESS:
            return render(request, "shop/order_success.html", {
                "intake": intake,
                "delay": SUCCESS_DISPLAY_SECONDS,
            })
        if state is IntakeState.FAILED:
            status = 503

    return render(request, "shop/order_form.html", {
        "intake": intake,
        "product": product,
        "countries": COUNTRIES,
    }, status=status)


# ------------------------------------------------------------------ back office

@require_http_methods(["GET", "POST"])
def bo_login(request):
    if request.user.is_authenticated and request.user.is_staff:
        return redirect("shop:bo_dashboard")
    error = None
    form = LoginForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        user, error = sign_in(
            request, form.cleaned_data["email"], form.cleaned_data["password"], locale_from_request(request),
        )
        if user is not None:
            target = request.GET.get("next") or ""
            if url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
                return redirect(target)
            return redirect("shop:bo_dashboard")
    return render(request, "backoffice/login.html", {"form": form, "error": error})


@require_POST
def bo_logout(request):
    sign_out(request)
    return redirect("shop:bo_login")


def _console(request):
    return BackofficeConsole.load(locale_from_request(request))


def _report(request, outcome):
    if outcome.ok:
        messages.success(request, outcome.message)
    else:
        messages.error(request, outcome.message)


def _back_to(tab):
    return redirect(f"{reverse('shop:bo_dashboard')}?tab={tab}")


def _console_or_error(request, tab):
    try:
        return _console(request), None
    except BackendError:
        return None, render(request, "backoffice/dashboard.html", {"load_failed": True, "tab": tab}, status=503)


@staff_required
def dashboard(request):
    tab = request.GET.get("tab") if request.GET.get("tab") in TABS else "categories"
    console, error = _console_or_error(request, tab)
    if error:
        return error

    snapshot = console.snapshot
    return render(request, "backoffice/dashboard.html", {
        "tab": tab,
        "categories": [(c, len(console.products_in_category(c.pk))) for c in snapshot.categories],
        "products": [(p, console.get_category_name(p.category_id)) for p in snapshot.products],
        "orders": snapshot.orders,
        "statuses": OrderStatus.choices,
        "stats": {
            "categories": len(snapshot.categories),
            "products": len(snapshot.products),
            "active_products": sum(1 for p in snapshot.products if p.is_active),
            "orders": len(snapshot.orders),
            "pending_orders": sum(1 for o in snapshot.orders if o.status == OrderStatus.PENDING),
        },
    })


@staff_required
def category_create(request):
    form = CategoryForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        console, error = _console_or_error(request, "categories")
        if error:
            return error
        outcome = console.create_category(form.cleaned_data)
        _report(request, outcome)
        if outcome.ok:
            return _back_to("categories")
    return render(request, "backoffice/category_form.html", {"form": form, "mode": "create"})


@staff_required
def category_edit(request, pk):
    category = get_object_or_404(Category, pk=pk)
    form = CategoryForm(request.POST or None, instance=category)
    if request.method == "POST" and form.is_valid():
        console, error = _console_or_error(request, "categories")
        if error:
            return error
        data = dict(form.cleaned_data)
        if data.get("order") is None:
            data["order"] = category.order
        outcome = console.update_category(pk, data)
        _report(request, outcome)
        if outcome.ok:
            return _back_to("categories")
    return render(request, "backoffice/category_form.html", {"form": form, "mode": "edit", "category": category})


@staff_required
@require_http_methods(["GET", "POST"])
def category_delete(request, pk):
    category = get_object_or_404(Category, pk=pk)
    console, error = _console_or_error(request, "categories")
    if error:
        return error
    if request.method == "GET":
        if console.products_in_category(pk):
            # Refuse before asking for confirmation
            _report(request, console.delete_category(pk))
            return _back_to("categories")
        return render(request, "backoffice/confirm_delete.html", {
            "object": category, "kind": "category", "cancel_tab": "categories",
        })
    _report(request, console.delete_category(pk))
    return _back_to("categories")


@staff_required
def product_create(request):
    form = ProductForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        console, error = _console_or_error(request, "products")
        if error:
            return error
        outcome = console.create_product(form.cleaned_data)
        _report(request, outcome)
        if outcome.ok:
            return _back_to("products")
    return render(request, "backoffice/product_form.html", {"form": form, "mode": "create"})


@staff_required
def product_edit(request, pk):
    product = get_object_or_404(Product, pk=pk)
    form = ProductForm(request.POST or None, instance=product)
    if request.method == "POST" and form.is_valid():
        console, error = _console_or_error(request, "products")
        if error:
            return error
        outcome = console.update_product(pk, form.cleaned_data)
        _report(request, outcome)
        if outcome.ok:
            return _back_to("products")
    return render(request, "backoffice/product_form.html", {"form": form, "mode": "edit", "product": product})


@staff_required
@require_http_methods(["GET", "POST"])
def product_delete(request, pk):
    product = get_object_or_404(Product, pk=pk)
    if request.method == "GET":
        return render(request, "backoffice/confirm_delete.html", {
            "object": product, "kind": "product", "cancel_tab": "products",
        })
    console, error = _console_or_error(request, "products")
    if error:
        return error
    _report(request, console.delete_product(pk))
    return _back_to("products")


@staff_required
@require_POST
def product_toggle(request, pk):
    console, error = _console_or_error(request, "products")
    if error:
        return error
    _report(request, console.toggle_product_active(pk))
    return _back_to("products")


@staff_required
@require_POST
def order_status(request, pk):
    get_object_or_404(Order, pk=pk)
    console, error = _console_or_error(request, "orders")
    if error:
        return error
    form = OrderStatusForm(request.POST)
    status = form.cleaned_data["status"] if form.is_valid() else request.POST.get("status", "")
    _report(request, console.update_order_status(pk, status))
    return _back_to("orders")


@staff_required
@require_http_methods(["GET", "POST"])
def order_delete(request, pk):
    order = get_object_or_404(Order, pk=pk)
    if request.method == "GET":
        return render(request, "backoffice/confirm_delete.html", {
            "object": order, "kind": "order", "cancel_tab": "orders",
        })
    console, error = _console_or_error(request, "orders")
    if error:
        return error
    _report(request, console.delete_order(pk))
    return _back_to("orders")
