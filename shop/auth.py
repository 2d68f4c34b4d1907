# shop/auth.py
import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth.decorators import user_passes_test
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import DatabaseError

from .locale import Bilingual, LocaleContext

logger = logging.getLogger(__name__)

LOGIN_ERRORS = {
    "bad_credentials": Bilingual("البريد الإلكتروني أو كلمة المرور غير صحيحة", "Incorrect email or password"),
    "invalid_email": Bilingual("البريد الإلكتروني غير صالح", "Invalid email address"),
    "generic": Bilingual("حدث خطأ أثناء تسجيل الدخول", "An error occurred while signing in"),
}


def is_staff(user):
    return user.is_authenticated and user.is_active and user.is_staff


staff_required = user_passes_test(is_staff, login_url="shop:bo_login")


class EmailBackend(ModelBackend):
    """Authenticate with an email address instead of a username."""

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = email or username
        if not email or password is None:
            return None
        User = get_user_model()
        user = User.objects.filter(email__iexact=email).order_by("pk").first()
        if user is None:
            # Run the hasher anyway so timing does not reveal unknown emails
            User().set_password(password)
            return None
        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None


def sign_in(request, email, password, locale=None):
    """
    Sign a staff member in.

    Returns ``(user, None)`` on success or ``(None, message)`` with the
    message in the current language.
    """
    locale = locale or LocaleContext()
    try:
        validate_email(email)
    except ValidationError:
        return None, locale.t(LOGIN_ERRORS["invalid_email"])

    try:
        user = authenticate(request, email=email, password=password)
    except DatabaseError:
        logger.exception("Sign-in failed for %s", email)
        return None, locale.t(LOGIN_ERRORS["generic"])

    if user is None or not user.is_staff:
        return None, locale.t(LOGIN_ERRORS["bad_credentials"])

    login(request, user, backend="shop.auth.EmailBackend")
    return user, None


def sign_out(request):
    logout(request)
