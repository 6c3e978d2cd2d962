from django.test import SimpleTestCase

from payments.status import PaymentOutcome, PaymentStatus, canonical_status


class CanonicalStatusTest(SimpleTestCase):
    def test_known_codes(self):
        self.assertEqual(canonical_status(100), PaymentStatus.APPROVED)
        self.assertEqual(canonical_status(90), PaymentStatus.PENDING)
        self.assertEqual(canonical_status(80), PaymentStatus.CANCELLED)
        self.assertEqual(canonical_status(70), PaymentStatus.DENIED)

    def test_everything_else_is_unknown(self):
        for code in (0, 20, 50, 85, 95, 99, 101, 999, -90, None, "100"):
            self.assertEqual(canonical_status(code), PaymentStatus.UNKNOWN, code)

    def test_terminal_states(self):
        self.assertTrue(PaymentStatus.APPROVED.is_terminal)
        self.assertTrue(PaymentStatus.CANCELLED.is_terminal)
        self.assertTrue(PaymentStatus.DENIED.is_terminal)
        self.assertFalse(PaymentStatus.PENDING.is_terminal)
        self.assertFalse(PaymentStatus.UNKNOWN.is_terminal)

    def test_outcome_derives_status(self):
        outcome = PaymentOutcome(order_id="123", status_code=90)
        self.assertEqual(outcome.status, PaymentStatus.PENDING)
        self.assertTrue(outcome.is_pending)
        self.assertFalse(outcome.is_approved)
        self.assertEqual(outcome, PaymentOutcome(order_id="123", status_code=90))
