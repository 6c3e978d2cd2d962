# payments/exceptions.py
from __future__ import annotations

from typing import Optional


class PaymentError(Exception):
    """Base class for everything the checkout flow reports back to a client."""


class PaymentValidationError(PaymentError):
    """Rejected input; raised before the gateway is contacted."""

    def __init__(self, field: str, message: str, errors: Optional[dict] = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.errors = errors or {field: [message]}


class MissingOrderError(PaymentError):
    """No order id in the session or request."""

    def __init__(self, message: str = "No order found"):
        super().__init__(message)
        self.message = message


class GatewayError(PaymentError):
    """
    Failure reported by (or while talking to) the payment gateway.

    ``message`` is the raw text and only goes to the log. ``friendly_message``
    is what the gateway offered for end users, if anything.
    """

    def __init__(self, message: str, friendly_message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.friendly_message = friendly_message
        self.status_code = status_code
