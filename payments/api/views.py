import logging

from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from rest_framework import permissions
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import APIView

from ..exceptions import GatewayError, MissingOrderError, PaymentValidationError
from ..responses import api_error_response, api_outcome_response, api_status_response, webhook_response
from ..serializers import OrderCreatedSerializer, StatusQuerySerializer
from ..services.checkout import create_order, order_id_from, parse_status_code, process_webhook, resolve_status
from ..user_messages import ERROR_MESSAGES, gateway_error_message, unexpected_error_message

log = logging.getLogger("payments")


class CreatePaymentView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        try:
            order = create_order(
                amount=request.data.get("amount"),
                description=request.data.get("description"),
                return_url=request.build_absolute_uri(reverse("payments_api:callback")),
            )
        except PaymentValidationError as e:
            return api_error_response(e.message, errors=e.errors)
        except GatewayError as e:
            log.error("PAYMENT_API_ERROR %s", e.message)
            return api_error_response(gateway_error_message(e))
        except Exception as e:
            log.exception("PAYMENT_API_UNEXPECTED_ERROR err=%s", e)
            return api_error_response(unexpected_error_message())

        out = OrderCreatedSerializer(dict(
            success=True, order_id=order.order_id, payment_url=order.payment_url
        )).data
        return Response(out, status=200)


@method_decorator(csrf_exempt, name="dispatch")
class PaymentCallbackView(APIView):
    """Redirect target of the hosted payment page for API clients (GET or POST)."""

    permission_classes = [permissions.AllowAny]

    def _handle(self, read_data):
        order_id = None
        try:
            data = read_data()
            if not isinstance(data, dict):
                # QueryDict is a dict; a JSON list or scalar body is not
                log.warning("PAYMENT_CALLBACK_BAD_BODY type=%s", type(data).__name__)
                return api_error_response(ERROR_MESSAGES["processing_failed"])
            order_id = order_id_from(data)
            outcome = resolve_status(order_id, parse_status_code(data.get("statusCode")))
        except ParseError as e:
            log.warning("PAYMENT_CALLBACK_PARSE_ERROR err=%s", e)
            return api_error_response(ERROR_MESSAGES["processing_failed"])
        except MissingOrderError as e:
            return api_error_response(e.message)
        except PaymentValidationError as e:
            return api_error_response(e.message, errors=e.errors)
        except GatewayError as e:
            log.error("PAYMENT_CALLBACK_GATEWAY_ERROR order_id=%s err=%s", order_id, e.message)
            return api_error_response(gateway_error_message(e))
        except Exception as e:
            log.exception("PAYMENT_CALLBACK_ERROR order_id=%s err=%s", order_id, e)
            return api_error_response(ERROR_MESSAGES["processing_failed"])

        log.info("PAYMENT_CALLBACK order_id=%s status=%s", outcome.order_id, outcome.status.value)
        return api_outcome_response(outcome)

    def get(self, request):
        return self._handle(lambda: request.query_params)

    def post(self, request):
        return self._handle(lambda: request.data if request.data else request.query_params)


class PaymentStatusView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        s = StatusQuerySerializer(data=request.query_params)
        if not s.is_valid():
            return api_error_response(str(s.errors["order_id"][0]), errors=s.errors)
        order_id = s.validated_data["order_id"]

        try:
            outcome = resolve_status(order_id)
        except GatewayError as e:
            log.error("PAYMENT_STATUS_GATEWAY_ERROR order_id=%s err=%s", order_id, e.message)
            return api_error_response(gateway_error_message(e))
        except Exception as e:
            log.exception("PAYMENT_STATUS_ERROR order_id=%s err=%s", order_id, e)
            return api_error_response(ERROR_MESSAGES["status_check_failed"])

        return api_status_response(outcome)


@method_decorator(csrf_exempt, name="dispatch")
class PaymentWebhookView(APIView):
    """
    Server-to-server notification from the gateway. Receipt is always
    acknowledged with 200 unless handling it blew up; the status itself goes
    to the payment_status_received signal, not into the response.
    """

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        try:
            process_webhook(request.data if request.data else request.query_params)
        except Exception as e:
            log.exception("PAYMENT_WEBHOOK_ERROR err=%s", e)
            return webhook_response(ok=False)
        return webhook_response(ok=True)
