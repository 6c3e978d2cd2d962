# payments/views.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

from django.contrib import messages
from django.http import HttpResponseRedirect
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods

from .exceptions import GatewayError, MissingOrderError, PaymentValidationError
from .responses import form_redirect, render_web_outcome
from .services.checkout import create_order, resolve_status
from .session import CheckoutSession
from .user_messages import ERROR_MESSAGES, gateway_error_message, unexpected_error_message

log = logging.getLogger("payments")


@require_http_methods(["GET", "POST"])
def payment_form(request):
    if request.method == "POST":
        return _start_payment(request)
    return render(request, "payments/create.html")


def _start_payment(request):
    amount = (request.POST.get("amount") or "").strip()
    description = request.POST.get("description") or ""

    try:
        order = create_order(
            amount=amount,
            description=description,
            return_url=request.build_absolute_uri(reverse("payments:return")),
        )
    except PaymentValidationError as e:
        log.info("PAYMENT_INVALID field=%s", e.field)
        messages.error(request, e.message)
        return form_redirect()
    except GatewayError as e:
        log.error("PAYMENT_ERROR %s", e.message)
        messages.error(request, gateway_error_message(e))
        return form_redirect()
    except Exception as e:
        log.exception("PAYMENT_UNEXPECTED_ERROR err=%s", e)
        messages.error(request, unexpected_error_message())
        return form_redirect()

    CheckoutSession.for_request(request).remember(order.order_id)
    return HttpResponseRedirect(order.payment_url)


@require_GET
def payment_return(request):
    """
    Visitor is back from the hosted payment page. The status code in the
    query string is not trusted here; the gateway is asked for the session's order.
    """
    checkout = CheckoutSession.for_request(request)
    try:
        outcome = resolve_status(checkout.order_id)
    except MissingOrderError:
        messages.error(request, ERROR_MESSAGES["no_order"])
        return form_redirect()
    except GatewayError as e:
        log.error("PAYMENT_RETURN_GATEWAY_ERROR order_id=%s err=%s", checkout.order_id, e.message)
        messages.error(request, gateway_error_message(e))
        return form_redirect()
    except Exception as e:
        log.exception("PAYMENT_RETURN_ERROR order_id=%s err=%s", checkout.order_id, e)
        messages.error(request, ERROR_MESSAGES["processing_failed"])
        return form_redirect()

    log.info("PAYMENT_RETURN order_id=%s status=%s", outcome.order_id, outcome.status.value)
    return render_web_outcome(request, outcome, checkout)
