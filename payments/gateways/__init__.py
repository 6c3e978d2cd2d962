# payments/gateways/__init__.py
from django.conf import settings

from .base import PaymentGatewayBase
from .fake import FakeGateway
from .paynl import PayNLGateway

GATEWAYS = {
    PayNLGateway.name: PayNLGateway,
    FakeGateway.name: FakeGateway,
}


def get_gateway(name=None) -> PaymentGatewayBase:
    cfg = getattr(settings, "PAYMENTS", {}) or {}
    name = (name or cfg.get("DEFAULT_GATEWAY") or "paynl").strip().lower()
    options = (cfg.get("GATEWAYS") or {}).get(name, {})

    try:
        gateway_cls = GATEWAYS[name]
    except KeyError:
        raise ValueError(f"Unknown gateway: {name}")
    return gateway_cls(options)


__all__ = ["PaymentGatewayBase", "FakeGateway", "PayNLGateway", "get_gateway"]
