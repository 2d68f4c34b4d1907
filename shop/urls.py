# shop/urls.py
from django.urls import path

from . import api
from . import views

app_name = "shop"

urlpatterns = [
    path("", views.home, name="home"),
    path("services/", views.services, name="services"),
    path("contact/", views.contact, name="contact"),
    path("language/", views.toggle_language, name="toggle_language"),

    path("products/", views.product_list, name="product_list"),
    path("products/<uuid:pk>/order/", views.order_create, name="order_create"),

    path("api/catalog/", api.catalog, name="api_catalog"),
    path("api/countries/", api.countries, name="api_countries"),
    path("api/orders/", api.order_create, name="api_order_create"),

    path("backoffice/login/", views.bo_login, name="bo_login"),
    path("backoffice/logout/", views.bo_logout, name="bo_logout"),

    # Back-office dashboard & CRUD
    path("backoffice/", views.dashboard, name="bo_dashboard"),

    path("backoffice/categories/new/", views.category_create, name="bo_category_create"),
    path("backoffice/categories/<uuid:pk>/edit/", views.category_edit, name="bo_category_edit"),
    path("backoffice/categories/<uuid:pk>/delete/", views.category_delete, name="bo_category_delete"),

    path("backoffice/products/new/", views.product_create, name="bo_product_create"),
    path("backoffice/products/<uuid:pk>/edit/", views.product_edit, name="bo_product_edit"),
    path("backoffice/products/<uuid:pk>/delete/", views.product_delete, name="bo_product_delete"),
    path("backoffice/products/<uuid:pk>/toggle/", views.product_toggle, name="bo_product_toggle"),

    path("backoffice/orders/<uuid:pk>/status/", views.order_status, name="bo_order_status"),
    path("backoffice/orders/<uuid:pk>/delete/", views.order_delete, name="bo_order_delete"),
]
