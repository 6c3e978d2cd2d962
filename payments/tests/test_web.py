from unittest import mock

from django.contrib.messages import constants, get_messages
from django.test import TestCase
from django.urls import reverse

from payments.exceptions import GatewayError
from payments.session import SESSION_KEY
from payments.status import PaymentOrder

from .stubs import StubGateway


def _messages(response):
    return [(m.level, m.message) for m in get_messages(response.wsgi_request)]


class PaymentFormTest(TestCase):
    def test_form_renders(self):
        res = self.client.get(reverse("payments:create"))
        self.assertEqual(res.status_code, 200)
        self.assertContains(res, 'name="amount"')
        self.assertContains(res, 'name="description"')

    def test_form_url(self):
        self.assertEqual(reverse("payments:create"), "/payment")
        self.assertEqual(reverse("payments:return"), "/payment/return")
        self.assertEqual(reverse("payments:webhook"), "/payment/webhook")


class StartPaymentTest(TestCase):
    def setUp(self):
        self.gw = StubGateway(order=PaymentOrder(order_id="123", payment_url="https://pay.example/123"))
        patcher = mock.patch("payments.services.checkout.get_gateway", return_value=self.gw)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_redirects_to_gateway_and_remembers_order(self):
        res = self.client.post(reverse("payments:create"), {"amount": "10.00", "description": "Test Order"})

        self.assertRedirects(res, "https://pay.example/123", fetch_redirect_response=False)
        self.assertEqual(self.client.session[SESSION_KEY], "123")
        (_, _, return_url), = self.gw.create_calls
        self.assertEqual(return_url, "http://testserver/payment/return")

    def test_new_order_overwrites_session(self):
        self.client.post(reverse("payments:create"), {"amount": "10.00", "description": "First"})
        self.gw.order = PaymentOrder(order_id="124", payment_url="https://pay.example/124")
        self.client.post(reverse("payments:create"), {"amount": "12.00", "description": "Second"})
        self.assertEqual(self.client.session[SESSION_KEY], "124")

    def test_invalid_amount(self):
        res = self.client.post(reverse("payments:create"), {"amount": "0", "description": "Test Order"})

        self.assertRedirects(res, reverse("payments:create"), fetch_redirect_response=False)
        self.assertEqual(self.gw.create_calls, [])
        self.assertNotIn(SESSION_KEY, self.client.session)
        (level, text), = _messages(res)
        self.assertEqual(level, constants.ERROR)
        self.assertIn("amount", text)

    def test_missing_description(self):
        res = self.client.post(reverse("payments:create"), {"amount": "10.00"})
        self.assertEqual(self.gw.create_calls, [])
        (level, text), = _messages(res)
        self.assertEqual(level, constants.ERROR)
        self.assertIn("description", text)

    def test_gateway_error_shows_friendly_message(self):
        self.gw.error = GatewayError("HTTP 401 raw body", friendly_message="Invalid API token")
        res = self.client.post(reverse("payments:create"), {"amount": "10.00", "description": "Test Order"})

        self.assertRedirects(res, reverse("payments:create"), fetch_redirect_response=False)
        self.assertEqual(_messages(res), [(constants.ERROR, "Payment error: Invalid API token")])

    def test_unexpected_error_hides_raw_text(self):
        self.gw.error = RuntimeError("db password is hunter2")
        res = self.client.post(reverse("payments:create"), {"amount": "10.00", "description": "Test Order"})

        (level, text), = _messages(res)
        self.assertEqual(level, constants.ERROR)
        self.assertNotIn("hunter2", text)
        self.assertEqual(text, "Error processing payment")


class PaymentReturnTest(TestCase):
    def setUp(self):
        self.gw = StubGateway()
        patcher = mock.patch("payments.services.checkout.get_gateway", return_value=self.gw)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _remember(self, order_id):
        session = self.client.session
        session[SESSION_KEY] = order_id
        session.save()

    def test_approved_clears_session(self):
        self._remember("123")
        self.gw.status_code = 100
        res = self.client.get(reverse("payments:return"))

        self.assertRedirects(res, reverse("payments:create"), fetch_redirect_response=False)
        self.assertEqual(_messages(res), [(constants.SUCCESS, "Payment successful! Order ID: 123")])
        self.assertNotIn(SESSION_KEY, self.client.session)
        self.assertEqual(self.gw.status_calls, ["123"])

    def test_pending_keeps_session(self):
        self._remember("123")
        self.gw.status_code = 90
        res = self.client.get(reverse("payments:return"))

        self.assertEqual(_messages(res), [(constants.WARNING, "Payment pending")])
        self.assertEqual(self.client.session[SESSION_KEY], "123")

    def test_failed_states_keep_session(self):
        for code in (80, 70, 999):
            self._remember("123")
            self.gw.status_code = code
            res = self.client.get(reverse("payments:return"))

            # unread flashes from earlier iterations are still queued ahead of this one
            self.assertEqual(_messages(res)[-1], (constants.ERROR, "Payment was not completed"), code)
            self.assertEqual(self.client.session[SESSION_KEY], "123")

    def test_query_status_code_is_not_trusted(self):
        self._remember("123")
        self.gw.status_code = 80
        res = self.client.get(reverse("payments:return"), {"id": "123", "statusCode": "100"})

        self.assertEqual(_messages(res), [(constants.ERROR, "Payment was not completed")])
        self.assertEqual(self.gw.status_calls, ["123"])

    def test_no_order_in_session(self):
        res = self.client.get(reverse("payments:return"))

        self.assertRedirects(res, reverse("payments:create"), fetch_redirect_response=False)
        self.assertEqual(_messages(res), [(constants.ERROR, "No order found")])
        self.assertEqual(self.gw.status_calls, [])

    def test_gateway_error(self):
        self._remember("123")
        self.gw.error = GatewayError("timeout")
        res = self.client.get(reverse("payments:return"))

        (level, text), = _messages(res)
        self.assertEqual(level, constants.ERROR)
        self.assertTrue(text.startswith("Payment error: "))
        self.assertNotIn("timeout", text)
        self.assertEqual(self.client.session[SESSION_KEY], "123")


class WebWebhookTest(TestCase):
    def test_form_encoded_orderid(self):
        gw = StubGateway(status_code=100)
        with mock.patch("payments.services.checkout.get_gateway", return_value=gw):
            res = self.client.post(reverse("payments:webhook"), {"orderid": "555"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"status": "ok"})
        self.assertEqual(gw.status_calls, ["555"])

    def test_gateway_failure(self):
        gw = StubGateway(error=GatewayError("boom"))
        with mock.patch("payments.services.checkout.get_gateway", return_value=gw):
            res = self.client.post(reverse("payments:webhook"), {"orderid": "555"})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json(), {"status": "error"})
