# shop/signals.py
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def on_logged_in(sender, request, user, **kwargs):
    logger.info("Back-office sign-in: %s", user.get_username())


@receiver(user_logged_out)
def on_logged_out(sender, request, user, **kwargs):
    logger.info("Back-office sign-out: %s", user.get_username() if user else "anonymous")


@receiver(user_login_failed)
def on_login_failed(sender, credentials, request=None, **kwargs):
    logger.warning("Back-office sign-in refused for %s", credentials.get("email") or credentials.get("username"))
