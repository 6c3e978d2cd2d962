from payments.gateways import PaymentGatewayBase
from payments.status import PaymentOrder


class StubGateway(PaymentGatewayBase):
    """Records every call; answers with a fixed order / status code or raises `error`."""

    name = "stub"

    def __init__(self, order=None, status_code=100, error=None):
        super().__init__({})
        self.order = order or PaymentOrder(order_id="123", payment_url="https://pay.example/123")
        self.status_code = status_code
        self.error = error
        self.create_calls = []
        self.status_calls = []

    def create_order(self, amount, description, return_url):
        self.create_calls.append((amount, description, return_url))
        if self.error:
            raise self.error
        return self.order

    def fetch_status(self, order_id):
        self.status_calls.append(order_id)
        if self.error:
            raise self.error
        return self.status_code
