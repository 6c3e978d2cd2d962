# payments/session.py
from typing import Optional

SESSION_KEY = "paynl_order_id"


class CheckoutSession:
    """
    The one piece of state the web flow carries across the gateway round trip:
    the id of the order the visitor was last sent to pay.
    """

    def __init__(self, session):
        self._session = session

    @classmethod
    def for_request(cls, request) -> "CheckoutSession":
        return cls(request.session)

    @property
    def order_id(self) -> Optional[str]:
        return self._session.get(SESSION_KEY) or None

    def remember(self, order_id: str) -> None:
        self._session[SESSION_KEY] = str(order_id)

    def forget(self) -> None:
        self._session.pop(SESSION_KEY, None)
