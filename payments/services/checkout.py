# payments/services/checkout.py
from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import MissingOrderError, PaymentValidationError
from ..gateways import PaymentGatewayBase, get_gateway
from ..serializers import CreateOrderSerializer
from ..status import PaymentOrder, PaymentOutcome
from .post_payment_flows import record_status_notification

log = logging.getLogger("payments")


def _first_error(errors: dict):
    field, messages = next(iter(errors.items()))
    if isinstance(messages, (list, tuple)) and messages:
        return field, str(messages[0])
    return field, str(messages)


def create_order(
    *,
    amount,
    description,
    return_url: str,
    gateway: Optional[PaymentGatewayBase] = None,
) -> PaymentOrder:
    """
    Validate the amount/description and start an order at the gateway.

    Raises PaymentValidationError before any gateway call, GatewayError when
    the gateway refuses or cannot be reached.
    """
    s = CreateOrderSerializer(data={"amount": amount, "description": description})
    if not s.is_valid():
        field, message = _first_error(s.errors)
        raise PaymentValidationError(field, message, errors=dict(s.errors))

    gateway = gateway or get_gateway()
    order = gateway.create_order(
        amount=s.validated_data["amount"],
        description=s.validated_data["description"],
        return_url=return_url,
    )
    log.info(
        "ORDER_CREATED order_id=%s gateway=%s amount=%s",
        order.order_id, gateway.name, s.validated_data["amount"],
    )
    return order


def order_id_from(data) -> Optional[str]:
    """Pay.nl sends `id`; older integrations send `orderid`."""
    order_id = data.get("id") or data.get("orderid")
    order_id = str(order_id).strip() if order_id is not None else ""
    return order_id or None


def parse_status_code(raw) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise PaymentValidationError("statusCode", "The status code must be an integer.")
    if isinstance(raw, int):
        return raw
    raw = str(raw).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise PaymentValidationError("statusCode", "The status code must be an integer.")


def resolve_status(
    order_id: Optional[str],
    known_status_code: Optional[int] = None,
    gateway: Optional[PaymentGatewayBase] = None,
) -> PaymentOutcome:
    """
    Canonical outcome for an order.

    A status code handed to us by the gateway's own redirect/webhook is
    trusted as-is; only without one is the gateway asked.
    """
    if not order_id:
        raise MissingOrderError()

    if known_status_code is None:
        gateway = gateway or get_gateway()
        status_code = gateway.fetch_status(order_id)
        log.debug("STATUS_FETCHED order_id=%s status_code=%s", order_id, status_code)
    else:
        status_code = known_status_code

    return PaymentOutcome(order_id=str(order_id), status_code=int(status_code))


def process_webhook(data, gateway: Optional[PaymentGatewayBase] = None) -> Optional[PaymentOutcome]:
    """
    Resolve the order a webhook talks about and pass the outcome downstream.
    Returns None when the notification names no order.
    """
    order_id = order_id_from(data)
    if not order_id:
        log.warning("WEBHOOK_WITHOUT_ORDER keys=%s", sorted(data.keys()))
        return None

    known = parse_status_code(data.get("statusCode"))
    outcome = resolve_status(order_id, known, gateway=gateway)
    log.info(
        "WEBHOOK_RECEIVED order_id=%s status_code=%s status=%s trusted=%s",
        outcome.order_id, outcome.status_code, outcome.status.value, known is not None,
    )
    record_status_notification(outcome, source="webhook")
    return outcome
