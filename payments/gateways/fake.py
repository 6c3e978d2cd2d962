# payments/gateways/fake.py
import secrets
from urllib.parse import urlencode

from ..status import PaymentOrder
from .base import PaymentGatewayBase


class FakeGateway(PaymentGatewayBase):
    """Local gateway: no network, the "payment page" is the return URL itself."""

    name = "fake"

    @property
    def status_code(self) -> int:
        return int(self.config.get("STATUS_CODE", 100))

    def create_order(self, amount, description, return_url):
        order_id = f"FAKE-{secrets.token_hex(6).upper()}"
        sep = "&" if "?" in (return_url or "") else "?"
        query = urlencode({"id": order_id, "statusCode": self.status_code})
        return PaymentOrder(order_id=order_id, payment_url=f"{return_url}{sep}{query}")

    def fetch_status(self, order_id):
        return self.status_code
