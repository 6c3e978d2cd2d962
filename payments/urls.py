# payments/urls.py
# -*- coding: utf-8 -*-
from django.urls import path

from .api.views import PaymentWebhookView
from .views import payment_form, payment_return

app_name = "payments"

urlpatterns = [
    path("payment", payment_form, name="create"),
    path("payment/return", payment_return, name="return"),
    path("payment/webhook", PaymentWebhookView.as_view(), name="webhook"),
]
