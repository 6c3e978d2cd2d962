# payments/status.py
"""
Canonical payment outcomes.

Pay.nl reports the state of an order as an integer status code. Everything
outside this module works with ``PaymentStatus`` instead of raw codes; the
translation happens once, in ``canonical_status``.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from django.db import models


class PaymentStatus(models.TextChoices):
    APPROVED = "approved", "Approved"
    PENDING = "pending", "Pending"
    CANCELLED = "cancelled", "Cancelled"
    DENIED = "denied", "Denied"
    UNKNOWN = "unknown", "Unknown"

    @property
    def is_terminal(self) -> bool:
        # pending/unknown may still change on a later check
        return self in (PaymentStatus.APPROVED, PaymentStatus.CANCELLED, PaymentStatus.DENIED)


STATUS_CODES = {
    100: PaymentStatus.APPROVED,
    90: PaymentStatus.PENDING,
    80: PaymentStatus.CANCELLED,
    70: PaymentStatus.DENIED,
}


def canonical_status(status_code) -> PaymentStatus:
    """Map a gateway status code to its canonical outcome (unmapped → UNKNOWN)."""
    if isinstance(status_code, bool):
        return PaymentStatus.UNKNOWN
    return STATUS_CODES.get(status_code, PaymentStatus.UNKNOWN)


@dataclass(frozen=True)
class PaymentOrder:
    order_id: str
    payment_url: str


@dataclass(frozen=True)
class PaymentOutcome:
    order_id: str
    status_code: int
    status: PaymentStatus = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "status", canonical_status(self.status_code))

    @property
    def is_approved(self) -> bool:
        return self.status == PaymentStatus.APPROVED

    @property
    def is_pending(self) -> bool:
        return self.status == PaymentStatus.PENDING

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
