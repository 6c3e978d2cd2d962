# payments/gateways/paynl.py
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import requests

from ..exceptions import GatewayError
from ..status import PaymentOrder
from .base import PaymentGatewayBase

log = logging.getLogger("payments")

DEFAULT_BASE_URL = "https://connect.pay.nl/v1"
ORDERS_PATH = "/orders"
ORDER_STATUS_PATH = "/orders/{order_id}/status"


@dataclass
class PayNLConfig:
    api_token: str    # AT-####-####, basic-auth username
    token_code: str   # secret, basic-auth password
    service_id: str   # SL-####-####
    test_mode: bool = True
    currency: str = "EUR"
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 25
    exchange_url: str = ""

    @classmethod
    def from_options(cls, options: dict) -> "PayNLConfig":
        return cls(
            api_token=options.get("API_TOKEN") or "",
            token_code=options.get("TOKEN_CODE") or "",
            service_id=options.get("SERVICE_ID") or "",
            test_mode=bool(options.get("TEST_MODE", True)),
            currency=options.get("CURRENCY") or "EUR",
            base_url=(options.get("BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=int(options.get("TIMEOUT") or 25),
            exchange_url=options.get("EXCHANGE_URL") or "",
        )

    @property
    def is_complete(self) -> bool:
        return all([self.api_token, self.token_code, self.service_id])


def amount_in_cents(amount) -> int:
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def friendly_message_from(response) -> Optional[str]:
    """Pay.nl error bodies carry `detail`/`title` and optionally `violations`."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    for key in ("detail", "title", "message"):
        v = data.get(key)
        if isinstance(v, str) and v.strip():
            return v.strip()

    violations = data.get("violations") or []
    if violations and isinstance(violations[0], dict):
        msg = violations[0].get("message")
        if msg:
            return str(msg)
    return None


class PayNLGateway(PaymentGatewayBase):
    name = "paynl"

    def __init__(self, config=None):
        super().__init__(config)
        self.cfg = PayNLConfig.from_options(self.config)

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> dict:
        if not self.cfg.is_complete:
            raise GatewayError("Pay.nl credentials not configured")

        url = f"{self.cfg.base_url}{path}"
        try:
            r = requests.request(
                method,
                url,
                json=payload,
                auth=(self.cfg.api_token, self.cfg.token_code),
                headers={"Accept": "application/json"},
                timeout=self.cfg.timeout,
            )
        except requests.RequestException as e:
            raise GatewayError(f"Pay.nl request failed: {e}") from e

        if r.status_code >= 400:
            raise GatewayError(
                f"Pay.nl {method} {path} returned HTTP {r.status_code}: {r.text[:500]}",
                friendly_message=friendly_message_from(r),
                status_code=r.status_code,
            )

        try:
            data = r.json()
        except ValueError as e:
            raise GatewayError(f"Pay.nl {method} {path} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise GatewayError(f"Pay.nl {method} {path} returned unexpected body")
        return data

    def create_order(self, amount, description, return_url):
        payload = {
            "serviceId": self.cfg.service_id,
            "amount": {"value": amount_in_cents(amount), "currency": self.cfg.currency},
            "description": description,
            "returnUrl": return_url,
            "integration": {"testMode": self.cfg.test_mode},
        }
        if self.cfg.exchange_url:
            payload["exchangeUrl"] = self.cfg.exchange_url

        log.debug("PAYNL_CREATE service=%s amount=%s test=%s", self.cfg.service_id, payload["amount"], self.cfg.test_mode)
        data = self._request("POST", ORDERS_PATH, payload)

        order_id = data.get("orderId") or data.get("id")
        payment_url = (data.get("links") or {}).get("redirect") or data.get("paymentUrl")
        if not order_id or not payment_url:
            raise GatewayError("Pay.nl order response lacks orderId or redirect link")
        return PaymentOrder(order_id=str(order_id), payment_url=str(payment_url))

    def fetch_status(self, order_id):
        data = self._request("GET", ORDER_STATUS_PATH.format(order_id=order_id))

        status = data.get("status")
        code = status.get("code") if isinstance(status, dict) else data.get("statusCode")
        try:
            return int(code)
        except (TypeError, ValueError):
            raise GatewayError(f"Pay.nl status response for {order_id} lacks a status code")
