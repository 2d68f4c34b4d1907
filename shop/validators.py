# shop/validators.py
"""
Order form rules.

Every rule is a plain function with no side effects. ``validate_order`` runs
all of them and reports every failing field at once, keyed by field name.
"""
import logging
import re

import phonenumbers

from .locale import Bilingual, LocaleContext

logger = logging.getLogger(__name__)

MIN_NAME_PARTS = 3
MIN_NAME_PART_LENGTH = 2
MIN_ADDRESS_LENGTH = 10
MIN_PHONE_INPUT_LENGTH = 6
MIN_FALLBACK_DIGITS = 7

_NON_DIGITS = re.compile(r"\D")

MESSAGES = {
    "country": Bilingual("يرجى اختيار الدولة", "Please select a country"),
    "customer_name": Bilingual("يجب أن يتكون الاسم من 3 أجزاء على الأقل", "Name must contain at least 3 parts"),
    "address": Bilingual("يرجى إدخال عنوان تفصيلي", "Please enter a detailed address"),
    "phone": Bilingual("رقم الهاتف غير صحيح", "Invalid phone number"),
    "whatsapp": Bilingual("رقم الواتساب غير صحيح", "Invalid WhatsApp number"),
}


def digits_only(value):
    return _NON_DIGITS.sub("", value or "")


def full_phone_number(country, raw):
    """Dial code of ``country`` followed by the digits typed by the customer."""
    return country.dial_code + digits_only(raw)


def validate_name(name):
    parts = (name or "").split()
    return len(parts) >= MIN_NAME_PARTS and all(len(p) >= MIN_NAME_PART_LENGTH for p in parts)


def validate_address(address):
    return len((address or "").strip()) >= MIN_ADDRESS_LENGTH


def validate_phone(raw, country):
    if not raw or len(raw) < MIN_PHONE_INPUT_LENGTH or country is None:
        return False
    candidate = full_phone_number(country, raw)
    try:
        return phonenumbers.is_valid_number(phonenumbers.parse(candidate, None))
    except Exception as exc:
        # The numbering plan could not classify the number: fall back to a length check
        logger.warning("Numbering-plan check failed for %s (%s): %s", country.code, type(exc).__name__, exc)
        return len(digits_only(raw)) >= MIN_FALLBACK_DIGITS


def validate_order(fields, country, same_as_phone=False, locale=None):
    """
    Validate the order form.

    Returns a dict mapping each invalid field to its message in the current
    language. An empty dict means the form may be submitted.
    """
    locale = locale or LocaleContext()
    errors = {}

    if country is None:
        errors["country"] = locale.t(MESSAGES["country"])
    if not validate_name(fields.customer_name):
        errors["customer_name"] = locale.t(MESSAGES["customer_name"])
    if not validate_address(fields.address):
        errors["address"] = locale.t(MESSAGES["address"])
    if not validate_phone(fields.phone, country):
        errors["phone"] = locale.t(MESSAGES["phone"])

    whatsapp = fields.phone if same_as_phone else fields.whatsapp
    if not validate_phone(whatsapp, country):
        errors["whatsapp"] = locale.t(MESSAGES["whatsapp"])

    return errors
