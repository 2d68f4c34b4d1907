# shop/exceptions.py


class ShopError(Exception):
    """Base class for errors raised by the shop app."""


class BackendError(ShopError):
    """The database could not serve a read or a write."""


class IntakeError(ShopError):
    """The order intake flow was driven out of order (e.g. submit without a product)."""
