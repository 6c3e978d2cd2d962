# payments/gateways/base.py
from abc import ABC, abstractmethod
from decimal import Decimal

from ..status import PaymentOrder


class PaymentGatewayBase(ABC):
    name: str = "base"

    def __init__(self, config=None):
        self.config = config or {}

    @abstractmethod
    def create_order(self, amount: Decimal, description: str, return_url: str) -> PaymentOrder:
        """Start a payment at the gateway.
        Return: PaymentOrder(order_id, payment_url). Raise GatewayError on failure."""
        raise NotImplementedError

    @abstractmethod
    def fetch_status(self, order_id: str) -> int:
        """Current status code of an order. Raise GatewayError on failure."""
        raise NotImplementedError
