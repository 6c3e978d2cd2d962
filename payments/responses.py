# payments/responses.py
"""
Outcome rendering.

Every handler turns a ``PaymentOutcome`` into a response through one of the
functions below, so the approved/pending/failed branching exists only here.
"""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpResponseRedirect
from django.urls import reverse
from rest_framework import status as http
from rest_framework.response import Response

from .session import CheckoutSession
from .status import PaymentOutcome, PaymentStatus
from .user_messages import ERROR_MESSAGES, SUCCESS_MESSAGES, WARNING_MESSAGES


def form_redirect() -> HttpResponseRedirect:
    return HttpResponseRedirect(reverse("payments:create"))


def render_web_outcome(request, outcome: PaymentOutcome, checkout: CheckoutSession) -> HttpResponseRedirect:
    if outcome.status == PaymentStatus.APPROVED:
        checkout.forget()
        messages.success(request, SUCCESS_MESSAGES["payment_successful"].format(order_id=outcome.order_id))
    elif outcome.status == PaymentStatus.PENDING:
        messages.warning(request, WARNING_MESSAGES["payment_pending"])
    else:
        # order id stays in the session so the visitor can check again
        messages.error(request, ERROR_MESSAGES["not_completed"])
    return form_redirect()


def api_outcome_response(outcome: PaymentOutcome) -> Response:
    body = {
        "order_id": outcome.order_id,
        "status_code": outcome.status_code,
    }
    if outcome.status == PaymentStatus.APPROVED:
        body.update(success=True, message=SUCCESS_MESSAGES["payment_successful_api"], status="approved")
        return Response(body, status=http.HTTP_200_OK)
    if outcome.status == PaymentStatus.PENDING:
        body.update(success=True, message=WARNING_MESSAGES["payment_pending"], status="pending")
        return Response(body, status=http.HTTP_200_OK)

    body.update(success=False, message=ERROR_MESSAGES["not_completed"], status="failed")
    return Response(body, status=http.HTTP_400_BAD_REQUEST)


def api_status_response(outcome: PaymentOutcome) -> Response:
    return Response(
        {
            "success": True,
            "order_id": outcome.order_id,
            "status_code": outcome.status_code,
            "status": outcome.status.value,
        },
        status=http.HTTP_200_OK,
    )


def api_error_response(message: str, status_code: int = http.HTTP_400_BAD_REQUEST, **extra) -> Response:
    body = {"success": False, "message": message}
    body.update(extra)
    return Response(body, status=status_code)


def webhook_response(ok: bool = True) -> Response:
    if ok:
        return Response({"status": "ok"}, status=http.HTTP_200_OK)
    return Response({"status": "error"}, status=http.HTTP_400_BAD_REQUEST)
