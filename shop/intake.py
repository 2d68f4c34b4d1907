# shop/intake.py
"""
Order intake: from picking a product to a stored ``Order``.

    SELECTING -> FILLING -> SUBMITTING -> SUCCESS -> (after a short delay) SELECTING
                    ^            |
                    |            +-> FAILED (write refused; the user may edit and submit again)
                    +-- validation errors keep the flow in FILLING
"""
import enum
import logging
import time
from dataclasses import dataclass, fields as dataclass_fields

from django.db import DatabaseError

from .countries import Country, get_country
from .exceptions import IntakeError
from .locale import Bilingual, LocaleContext
from .models import Order, OrderStatus
from .validators import full_phone_number, validate_order

logger = logging.getLogger(__name__)

SUCCESS_DISPLAY_SECONDS = 2

SUBMIT_FAILED = Bilingual(
    "تعذر إرسال الطلب، يرجى المحاولة مرة أخرى",
    "Your order could not be sent, please try again",
)
SUBMIT_SUCCEEDED = Bilingual(
    "تم استلام طلبك! سنتواصل معك قريباً",
    "Order received! We will contact you soon.",
)


def _truthy(value):
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "on", "yes"}


class IntakeState(enum.Enum):
    SELECTING = "selecting"
    FILLING = "filling"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class OrderFields:
    customer_name: str = ""
    address: str = ""
    phone: str = ""
    whatsapp: str = ""

    @classmethod
    def names(cls):
        return [f.name for f in dataclass_fields(cls)]


class OrderIntake:
    def __init__(self, locale=None, clock=time.monotonic):
        self.locale = locale or LocaleContext()
        self._clock = clock
        self.state = IntakeState.SELECTING
        self.product = None
        self.order = None
        self.failure = ""
        self._succeeded_at = None
        self._reset_form()

    def _reset_form(self):
        self.country = None
        self.fields = OrderFields()
        self.errors = {}
        self.same_as_phone = False

    def open(self, product):
        self.product = product
        self.order = None
        self.failure = ""
        self._reset_form()
        self.state = IntakeState.FILLING

    def close(self):
        self.product = None
        self._succeeded_at = None
        self._reset_form()
        self.state = IntakeState.SELECTING

    def choose_country(self, country):
        if country is not None and not isinstance(country, Country):
            country = get_country(str(country))
        self.country = country

    def set_field(self, name, value):
        if name not in OrderFields.names():
            raise IntakeError(f"Unknown order field: {name}")
        # Decoded JSON may carry numbers or lists
        setattr(self.fields, name, "" if value is None else str(value))
        if self.same_as_phone:
            self.fields.whatsapp = self.fields.phone

    def set_same_as_phone(self, enabled):
        # Turning the mirror off keeps the last mirrored value
        self.same_as_phone = bool(enabled)
        if self.same_as_phone:
            self.fields.whatsapp = self.fields.phone

    def fill(self, data):
        """Load a submitted form (POST data or decoded JSON) into the flow."""
        self.choose_country(data.get("country") or None)
        for name in OrderFields.names():
            if name in data:
                self.set_field(name, data.get(name))
        self.set_same_as_phone(_truthy(data.get("same_as_phone")))

    def validate(self):
        self.errors = validate_order(self.fields, self.country, self.same_as_phone, self.locale)
        return self.errors

    def submit(self):
        if self.product is None:
            raise IntakeError("No product selected")
        if self.state not in (IntakeState.FILLING, IntakeState.FAILED):
            raise IntakeError(f"Cannot submit from state {self.state.value}")

        if self.validate():
            self.state = IntakeState.FILLING
            return self.state

        self.state = IntakeState.SUBMITTING
        self.failure = ""
        whatsapp = self.fields.phone if self.same_as_phone else self.fields.whatsapp
        try:
            self.order = Order.objects.create(
                product=self.product,
                product_name=self.product.name_for(self.locale.language),
                customer_name=self.fields.customer_name.strip(),
                address=self.fields.address.strip(),
                phone=full_phone_number(self.country, self.fields.phone),
                whatsapp=full_phone_number(self.country, whatsapp),
                country=self.country.code,
                status=OrderStatus.PENDING,
            )
        except DatabaseError:
            logger.exception("Order for product %s could not be stored", self.product.pk)
            self.failure = self.locale.t(SUBMIT_FAILED)
            self.state = IntakeState.FAILED
            return self.state

        logger.info("Order %s stored for product %s", self.order.pk, self.product.pk)
        self.state = IntakeState.SUCCESS
        self._succeeded_at = self._clock()
        return self.state

    @property
    def success_message(self):
        return self.locale.t(SUBMIT_SUCCEEDED)

    def poll(self):
        """Return to SELECTING once the success message has been shown long enough."""
        if self.state is IntakeState.SUCCESS and self._clock() - self._succeeded_at >= SUCCESS_DISPLAY_SECONDS:
            self.close()
        return self.state
