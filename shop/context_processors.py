# shop/context_processors.py
import logging

from django.conf import settings
from django.db import DatabaseError

from .locale import locale_from_request
from .models import Category

logger = logging.getLogger(__name__)


def site(request):
    """Current language and the categories shown in the navigation mega-menu."""
    locale = locale_from_request(request)
    try:
        nav_categories = list(Category.objects.filter(is_active=True).order_by("order"))
        nav_failed = False
    except DatabaseError:
        logger.exception("Could not load navigation categories")
        nav_categories, nav_failed = [], True
    return {
        "locale": locale,
        "site_name": settings.SITE_NAME,
        "contact_email": settings.CONTACT_EMAIL,
        "nav_categories": nav_categories,
        "nav_failed": nav_failed,
    }
