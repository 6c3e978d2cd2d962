# payments/services/post_payment_flows.py
from __future__ import annotations

import logging

from ..signals import payment_status_received
from ..status import PaymentOutcome

log = logging.getLogger("payments")


def record_status_notification(outcome: PaymentOutcome, source: str = "webhook"):
    """
    Hand a resolved outcome to whoever cares about it downstream.

    Nothing is stored here; receivers of ``payment_status_received`` decide
    what an approved/cancelled/... order means for the rest of the system.
    """
    log.info(
        "POSTPAY %s order_id=%s status_code=%s status=%s terminal=%s",
        source,
        outcome.order_id,
        outcome.status_code,
        outcome.status.value,
        outcome.is_terminal,
    )
    payment_status_received.send(sender=PaymentOutcome, outcome=outcome, source=source)
