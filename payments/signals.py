# payments/signals.py
from django.dispatch import Signal

# Sent with `outcome` (PaymentOutcome) and `source` ("webhook", ...) whenever the
# gateway tells us about an order. Persistence/notification hooks subscribe here.
payment_status_received = Signal()
